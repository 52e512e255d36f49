"""Shared application constants.

Centralizes repeat values used across the session, statistics and reminder
logic so we can document and adjust them in one place.
"""

# Mean Earth radius used for great-circle distances (meters)
EARTH_RADIUS_M = 6371000.0

# Fixed calorie model: kcal burned per kilometer, regardless of pace or weight
CALORIES_PER_KM = 60.0

# Single-run distance the home screen progress ring fills toward (km)
RUN_TARGET_KM = 5.0

# Monthly distance goal used until the user sets one (km)
DEFAULT_MONTHLY_GOAL_KM = 50.0

# Map region padding around a trail, and the smallest span shown (degrees)
REGION_PADDING = 1.5
MIN_REGION_DELTA = 0.01

# Achievement distance thresholds (km)
DISTANCE_BADGES_KM = [100.0, 300.0]

# Reminder defaults. Weekday indices: 0 = Sunday ... 6 = Saturday.
DEFAULT_REMINDER_HOUR = 8
DEFAULT_REMINDER_MINUTE = 0
DEFAULT_REMINDER_DAYS = [1, 3, 5]  # Mon, Wed, Fri
REMINDER_TITLE = "Time to Run!"
REMINDER_ID_PREFIX = "runReminder-"

REMINDER_MESSAGES = [
    "Time for your run! Every step brings you closer to your goals.",
    "Let's go for a run! Your body will thank you for this workout.",
    "Ready to hit the pavement? Today's run awaits you!",
    "Don't skip your run! Consistency is the key to success.",
    "It's running time! Push yourself and feel the progress.",
    "Get moving! A good run will boost your energy and mood.",
    "Your run is calling! Step outside and enjoy the fresh air.",
    "Time to lace up! Every run makes you stronger.",
    "Don't wait, just run! The hardest part is getting started.",
    "Make it happen today! Your future self will thank you for this run.",
]

CURRENT_RUN_MESSAGE = "Current Run"
COMPLETED_RUNS_MESSAGE = "Run"

MOTIVATIONAL_MESSAGES = [
    "Every run makes you stronger!",
    "Get up and run towards your goals!",
    "Today is the perfect day for a run!",
    "Run not away from problems, but towards your dreams!",
    "One step at a time - and you'll reach the top!",
    "Sweat today - strength tomorrow!",
    "Your body can do anything - your mind just needs to be convinced!",
    "Running is freedom, feel it!",
    "Don't wait for the perfect moment - start right now!",
    "Every kilometer is a victory over yourself!",
    "Run forward, leaving doubts behind!",
    "Your legs may get tired, but your heart never will!",
    "A run is the best way to start the day!",
    "Don't stop until you're proud of yourself!",
    "Running changes not only the body, but also the mind!",
    "Take a step towards a better version of yourself!",
    "Remember: even champions start with the first step!",
    "A run is your time, your space!",
    "Run because you can!",
    "Every run brings you closer to your goal!",
]
