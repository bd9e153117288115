import uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import DateTime, Enum as SAEnum, Float, ForeignKey, Integer, String, Uuid, func
from fittrack.db import Base
from fittrack.domain.records import ExerciseType

class WorkoutExercise(Base):
    __tablename__ = "workout_exercises"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    # order inside the workout
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    type: Mapped[ExerciseType] = mapped_column(
        SAEnum(ExerciseType, name="exercise_type", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    duration: Mapped[float | None] = mapped_column(Float, nullable=True)
    distance: Mapped[float | None] = mapped_column(Float, nullable=True)
    weight: Mapped[float | None] = mapped_column(Float, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[DateTime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    workout = relationship("Workout", back_populates="exercises")
