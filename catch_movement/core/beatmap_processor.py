import logging
from typing import List

from catch_movement.core.catcher import ALLOWED_CATCH_RANGE, BASE_DASH_SPEED, calculate_catch_width
from catch_movement.core.parser import CatchHitObject

logger = logging.getLogger(__name__)

# 1/4th of a frame of grace time
HYPER_DASH_GRACE_MS = 1000.0 / 60.0 / 4


def initialise_hyper_dash(palpable_objects: List[CatchHitObject], circle_size: float) -> int:
    """
    Mark every object whose next object can't be reached by dashing.

    Objects must already be in start time order. Returns the number of
    hyperdash objects found.
    """
    half_catcher_width = calculate_catch_width(circle_size) / 2
    half_catcher_width /= ALLOWED_CATCH_RANGE

    last_direction = 0
    last_excess = half_catcher_width
    hyper_dash_count = 0

    for obj in palpable_objects:
        obj.hyper_dash_target = None
        obj.distance_to_hyper_dash = 0.0

    for current, next_obj in zip(palpable_objects, palpable_objects[1:]):
        this_direction = 1 if next_obj.effective_x > current.effective_x else -1
        time_to_next = next_obj.start_time - current.start_time - HYPER_DASH_GRACE_MS

        # leftover reach from the previous movement only helps when moving the same way
        distance_to_next = abs(next_obj.effective_x - current.effective_x) - (
            last_excess if last_direction == this_direction else half_catcher_width
        )
        distance_to_hyper = time_to_next * BASE_DASH_SPEED - distance_to_next

        if distance_to_hyper < 0:
            current.hyper_dash_target = next_obj
            last_excess = half_catcher_width
            hyper_dash_count += 1
        else:
            current.distance_to_hyper_dash = distance_to_hyper
            last_excess = min(max(distance_to_hyper, 0.0), half_catcher_width)

        last_direction = this_direction

    logger.debug("found %d hyperdashes in %d objects", hyper_dash_count, len(palpable_objects))
    return hyper_dash_count
