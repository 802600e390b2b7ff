import numpy as np
from typing import Any, Dict

from catch_movement.difficulty.history import DifficultyObjectHistory
from catch_movement.difficulty.preprocessing import CatchDifficultyHitObject

FEATURE_COLUMNS = [
    'start_time',
    'normalized_position',
    'player_position',
    'distance_moved',
    'exact_distance_moved',
    'strain_time',
    'last_hyper_dash',
]


def movement_features(history: DifficultyObjectHistory[CatchDifficultyHitObject]) -> np.ndarray:
    # one row per difficulty object, in time order
    rows = [
        np.array([
            obj.start_time,
            obj.normalized_position,
            obj.player_position,
            obj.distance_moved,
            obj.exact_distance_moved,
            obj.strain_time,
            1.0 if obj.last_object.hyper_dash else 0.0,
        ], dtype=np.float64)
        for obj in history
    ]

    if not rows:
        return np.zeros((0, len(FEATURE_COLUMNS)), dtype=np.float64)

    return np.stack(rows)


def summarize(features: np.ndarray) -> Dict[str, Any]:
    col = {name: i for i, name in enumerate(FEATURE_COLUMNS)}

    if features.shape[0] == 0:
        return {
            'objects': 0,
            'total_distance_moved': 0.0,
            'total_exact_distance_moved': 0.0,
            'mean_strain_time': 0.0,
            'hyper_dashes': 0,
        }

    return {
        'objects': int(features.shape[0]),
        'total_distance_moved': float(np.abs(features[:, col['distance_moved']]).sum()),
        'total_exact_distance_moved': float(np.abs(features[:, col['exact_distance_moved']]).sum()),
        'mean_strain_time': float(features[:, col['strain_time']].mean()),
        'hyper_dashes': int(features[:, col['last_hyper_dash']].sum()),
    }
