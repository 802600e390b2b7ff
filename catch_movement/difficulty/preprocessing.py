from dataclasses import dataclass
from typing import Optional

from catch_movement.difficulty.history import DifficultyHitObject, DifficultyObjectHistory

NORMALIZED_HITOBJECT_RADIUS = 41.0
ABSOLUTE_PLAYER_POSITIONING_ERROR = 16.0

# reach either side of an object's exact position at which it is still caught comfortably
PLAYER_REACH = NORMALIZED_HITOBJECT_RADIUS - ABSOLUTE_PLAYER_POSITIONING_ERROR

# every strain interval is hard capped at the equivalent of 375 BPM streaming speed
MIN_STRAIN_TIME = 40.0


@dataclass(frozen=True)
class CatchDifficultyHitObject:
    timing: DifficultyHitObject

    normalized_position: float
    last_normalized_position: float

    player_position: float
    last_player_position: float
    distance_moved: float
    exact_distance_moved: float

    # milliseconds since the previous object, with a minimum of 40ms
    strain_time: float

    @classmethod
    def create(
        cls,
        hit_object,
        last_object,
        clock_rate: float,
        half_catcher_width: float,
        history: DifficultyObjectHistory["CatchDifficultyHitObject"],
        index: int,
    ) -> "CatchDifficultyHitObject":
        if not half_catcher_width > 0:
            raise ValueError(f"half_catcher_width must be positive, got {half_catcher_width}")
        if index != len(history):
            raise ValueError(f"object {index} built against a history of {len(history)} objects")

        timing = DifficultyHitObject.create(hit_object, last_object, clock_rate, index)

        # scale everything by this factor so a uniform CircleSize can be assumed among beatmaps
        scaling_factor = NORMALIZED_HITOBJECT_RADIUS / half_catcher_width

        normalized_position = hit_object.effective_x * scaling_factor
        last_normalized_position = last_object.effective_x * scaling_factor

        strain_time = max(MIN_STRAIN_TIME, timing.delta_time)

        if index == 0:
            last_player_position = last_normalized_position
        else:
            last_player_position = history.previous(index).player_position

        player_position = min(
            max(last_player_position, normalized_position - PLAYER_REACH),
            normalized_position + PLAYER_REACH,
        )

        # after a hyperdash we ARE in the correct position, always
        if last_object.hyper_dash:
            player_position = normalized_position

        distance_moved = player_position - last_player_position

        # for the exact distance the catcher is assumed to be in the correct position for both objects
        exact_distance_moved = normalized_position - last_player_position

        return cls(
            timing=timing,
            normalized_position=normalized_position,
            last_normalized_position=last_normalized_position,
            player_position=player_position,
            last_player_position=last_player_position,
            distance_moved=distance_moved,
            exact_distance_moved=exact_distance_moved,
            strain_time=strain_time,
        )

    @property
    def base_object(self):
        return self.timing.base_object

    @property
    def last_object(self):
        return self.timing.last_object

    @property
    def index(self) -> int:
        return self.timing.index

    @property
    def start_time(self) -> float:
        return self.timing.start_time

    @property
    def delta_time(self) -> float:
        return self.timing.delta_time

    def previous(self, history, backwards_index: int = 0) -> Optional["CatchDifficultyHitObject"]:
        return history.previous(self.index, backwards_index)

    def next(self, history, forwards_index: int = 0) -> Optional["CatchDifficultyHitObject"]:
        return history.next(self.index, forwards_index)
