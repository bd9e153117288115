from fittrack.models.user import User
from fittrack.models.workout import Workout
from fittrack.models.exercise import WorkoutExercise
from fittrack.models.group import Group, GroupMember

__all__ = ["User", "Workout", "WorkoutExercise", "Group", "GroupMember"]
