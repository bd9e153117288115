"""Pure scoring and ranking core. No I/O, no shared state."""
from fittrack.domain.records import (
    Exercise,
    ExerciseType,
    Group,
    LeaderboardEntry,
    User,
    Workout,
    remove_exercise,
    remove_workout,
    replace_exercise,
    replace_workout,
)
from fittrack.domain.scoring import (
    cardio_score,
    compute_exercise_score,
    compute_user_total_score,
    compute_workout_score,
    exercise_score,
    intensity_multiplier,
    lifting_score,
    user_average_score,
    user_total_score,
    workout_score,
)
from fittrack.domain.ranking import rank_of, sort_leaderboard, sort_members_by_score_desc
from fittrack.domain.codes import (
    GROUP_CODE_ALPHABET,
    GROUP_CODE_LENGTH,
    generate_group_code,
    is_valid_group_code,
    normalize_group_code,
)

__all__ = [
    "Exercise",
    "ExerciseType",
    "Group",
    "LeaderboardEntry",
    "User",
    "Workout",
    "remove_exercise",
    "remove_workout",
    "replace_exercise",
    "replace_workout",
    "cardio_score",
    "compute_exercise_score",
    "compute_user_total_score",
    "compute_workout_score",
    "exercise_score",
    "intensity_multiplier",
    "lifting_score",
    "user_average_score",
    "user_total_score",
    "workout_score",
    "rank_of",
    "sort_leaderboard",
    "sort_members_by_score_desc",
    "GROUP_CODE_ALPHABET",
    "GROUP_CODE_LENGTH",
    "generate_group_code",
    "is_valid_group_code",
    "normalize_group_code",
]
