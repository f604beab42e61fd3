"""Per-child overview: last entry of each activity and today's totals."""

from datetime import date
from typing import Optional

from buddy_assistant.models.diaper import Diaper
from buddy_assistant.models.feeding import Feeding
from buddy_assistant.models.result import ChildOverview
from buddy_assistant.models.sleep import Sleep
from buddy_assistant.models.tummy_time import TummyTime
from buddy_assistant.services.child_service import find_child
from buddy_assistant.services.diaper_service import summarize_diapers
from buddy_assistant.services.feeding_service import summarize_feedings
from buddy_assistant.services.sleep_service import summarize_sleep
from buddy_assistant.services.store import DIAPERS, FEEDINGS, SLEEP, TUMMY_TIMES, ActivityStore
from buddy_assistant.services.tummy_time_service import summarize_tummy_time


def _maybe(model_cls, data: Optional[dict]):
    return model_cls.model_validate(data) if data else None


async def get_child_overview(
    store: ActivityStore, child_name: str, today: Optional[date] = None
) -> ChildOverview:
    child = await find_child(store, child_name)

    feedings = [Feeding.model_validate(f) for f in await store.query_today(FEEDINGS, child.id)]
    sleeps = [Sleep.model_validate(s) for s in await store.query_today(SLEEP, child.id)]
    diapers = [Diaper.model_validate(d) for d in await store.query_today(DIAPERS, child.id)]
    tummy = [TummyTime.model_validate(t) for t in await store.query_today(TUMMY_TIMES, child.id)]

    return ChildOverview(
        child_id=child.id,
        name=child.full_name,
        age=child.age_description(today or date.today()),
        last_feeding=_maybe(Feeding, await store.query_last(FEEDINGS, child.id)),
        last_sleep=_maybe(Sleep, await store.query_last(SLEEP, child.id)),
        last_diaper=_maybe(Diaper, await store.query_last(DIAPERS, child.id)),
        last_tummy_time=_maybe(TummyTime, await store.query_last(TUMMY_TIMES, child.id)),
        feedings_today=summarize_feedings(feedings),
        sleep_today=summarize_sleep(sleeps),
        diapers_today=summarize_diapers(diapers),
        tummy_time_today=summarize_tummy_time(tummy),
    )
