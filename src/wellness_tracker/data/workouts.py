"""Workout catalog with average calories burned per minute."""

from wellness_tracker.domain.catalog import Catalog, WorkoutType

WORKOUT_TYPES: tuple[WorkoutType, ...] = (
    WorkoutType("1", "Running (Moderate)", "Cardio", 10),
    WorkoutType("2", "Running (Fast)", "Cardio", 15),
    WorkoutType("3", "Jogging", "Cardio", 8),
    WorkoutType("4", "Walking (Brisk)", "Cardio", 4),
    WorkoutType("5", "Cycling (Moderate)", "Cardio", 8),
    WorkoutType("6", "Cycling (Vigorous)", "Cardio", 12),
    WorkoutType("7", "Swimming", "Cardio", 11),
    WorkoutType("8", "Jump Rope", "Cardio", 13),
    WorkoutType("9", "Dancing", "Cardio", 6),
    WorkoutType("10", "Aerobics", "Cardio", 7),
    WorkoutType("11", "Weight Training (General)", "Strength", 6),
    WorkoutType("12", "Push-ups", "Strength", 8),
    WorkoutType("13", "Pull-ups", "Strength", 9),
    WorkoutType("14", "Squats", "Strength", 7),
    WorkoutType("15", "Deadlifts", "Strength", 8),
    WorkoutType("16", "Bench Press", "Strength", 6),
    WorkoutType("17", "Bodyweight Training", "Strength", 5),
    WorkoutType("18", "Cricket", "Sports", 5),
    WorkoutType("19", "Football", "Sports", 9),
    WorkoutType("20", "Basketball", "Sports", 8),
    WorkoutType("21", "Tennis", "Sports", 7),
    WorkoutType("22", "Badminton", "Sports", 6),
    WorkoutType("23", "Table Tennis", "Sports", 4),
    WorkoutType("24", "Yoga (Hatha)", "Yoga", 3),
    WorkoutType("25", "Yoga (Vinyasa)", "Yoga", 4),
    WorkoutType("26", "Yoga (Power)", "Yoga", 5),
    WorkoutType("27", "Stretching", "Flexibility", 2),
    WorkoutType("28", "Pilates", "Flexibility", 4),
    WorkoutType("29", "Martial Arts", "Combat", 10),
    WorkoutType("30", "Boxing", "Combat", 12),
    WorkoutType("31", "Hiking", "Outdoor", 6),
    WorkoutType("32", "Rock Climbing", "Outdoor", 11),
)

WORKOUT_CATALOG: Catalog[WorkoutType] = Catalog(WORKOUT_TYPES)
