import logging
from typing import Iterable, List

from catch_movement.core.beatmap_processor import initialise_hyper_dash
from catch_movement.core.catcher import difficulty_half_catcher_width
from catch_movement.core.parser import CatchHitObject, Parser
from catch_movement.difficulty.history import DifficultyObjectHistory
from catch_movement.difficulty.preprocessing import CatchDifficultyHitObject

logger = logging.getLogger(__name__)

MOD_CLOCK_RATES = {
    "DT": 1.5,
    "NC": 1.5,
    "HT": 0.75,
    "DC": 0.75,
}


def clock_rate_for_mods(mods: Iterable[str]) -> float:
    rate = 1.0
    for mod in mods:
        rate = MOD_CLOCK_RATES.get(mod.upper(), rate)
    return rate


def create_difficulty_hit_objects(
    beatmap: Parser,
    clock_rate: float = 1.0,
) -> DifficultyObjectHistory[CatchDifficultyHitObject]:
    """
    Build the movement simulated difficulty objects for a parsed beatmap.

    The first palpable object only acts as the previous object of the
    second one, so n palpable objects give n - 1 difficulty objects.
    """
    palpable: List[CatchHitObject] = sorted(beatmap.palpable_objects, key=lambda h: h.start_time)

    initialise_hyper_dash(palpable, beatmap.circle_size)
    half_catcher_width = difficulty_half_catcher_width(beatmap.circle_size)

    return build_history(palpable, clock_rate, half_catcher_width)


def build_history(
    palpable_objects: List[CatchHitObject],
    clock_rate: float,
    half_catcher_width: float,
) -> DifficultyObjectHistory[CatchDifficultyHitObject]:
    history: DifficultyObjectHistory[CatchDifficultyHitObject] = DifficultyObjectHistory()

    if len(palpable_objects) < 2:
        logger.warning("need at least 2 palpable objects, got %d", len(palpable_objects))
        return history

    last_object = palpable_objects[0]
    for hit_object in palpable_objects[1:]:
        history.build(
            lambda h, index: CatchDifficultyHitObject.create(
                hit_object, last_object, clock_rate, half_catcher_width, h, index
            )
        )
        last_object = hit_object

    logger.debug("built %d difficulty objects at clock rate %.2f", len(history), clock_rate)
    return history
