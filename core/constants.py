APP_NAME = "YouMatter"
VERSION = "1.0.0"
CURRENCY_SYMBOL = "$"

# Risk formula
OPTIMAL_BMI = 22.5
MAX_BMI_DEVIATION = 10.0
WEIGHT_BMI = 0.6
WEIGHT_EXERCISE = 0.4
MAX_EXERCISE_DAYS = 7

AGE_FACTOR_THRESHOLD = 35
AGE_FACTOR_STEP_YEARS = 10
AGE_FACTOR_STEP = 0.02

# (upper bound inclusive, level, surcharge, description)
RISK_TIERS = (
    (0.20, 1, 0.05, "Lowest risk - Excellent health profile"),
    (0.40, 2, 0.10, "Low risk - Good health profile"),
    (0.60, 3, 0.15, "Medium risk - Average health profile"),
    (0.80, 4, 0.20, "High risk - Health improvement recommended"),
    (1.00, 5, 0.25, "Highest risk - Significant health concerns"),
)

DISCOUNT_BY_LEVEL = {
    1: 0.25,
    2: 0.20,
    3: 0.15,
    4: 0.10,
    5: 0.05,
}

RISK_CATEGORY_BY_LEVEL = {
    1: "low",
    2: "low",
    3: "moderate",
    4: "high",
    5: "high",
}

RISK_DISPLAY_COLORS = {
    1: "bg-green-100 text-green-800",
    2: "bg-blue-100 text-blue-800",
    3: "bg-yellow-100 text-yellow-800",
    4: "bg-orange-100 text-orange-800",
    5: "bg-red-100 text-red-800",
}

BMI_CATEGORIES = (
    (18.5, "underweight"),
    (25.0, "normal"),
    (30.0, "overweight"),
)

# Profile normalization
EXERCISE_FREQUENCY_DAYS = {
    "none": 0,
    "light": 2,
    "moderate": 4,
    "heavy": 6,
}

EXERCISE_PHRASE_DAYS = {
    "daily": 7,
    "every day": 7,
    "rarely": 1,
    "never": 0,
}

DEFAULT_CHALLENGE_WINDOW_DAYS = 7

SMOKER_OPTIONS = ["never", "former", "current"]
OCCUPATION_OPTIONS = ["desk", "physical", "hazardous", "healthcare", "other"]
GENDER_OPTIONS = ["male", "female", "other"]

# Plan matching
AGE_GROUPS = (
    (25, "18-25"),
    (35, "26-35"),
    (45, "36-45"),
    (55, "46-55"),
    (65, "56-65"),
)
SENIOR_AGE_GROUP = "65+"

RISK_MULTIPLIERS = {
    "low": 0.9,
    "moderate": 1.0,
    "high": 1.2,
}

MATCH_BASE_SCORE = 50
MATCH_AGE_GROUP_BONUS = 20
MATCH_RISK_CATEGORY_BONUS = 15
MATCH_LEVEL_BONUS = 10
MATCH_POPULAR_BONUS = 5
MATCH_CHRONIC_FEATURE_BONUS = 15
MATCH_FITNESS_FEATURE_BONUS = 10
MATCH_MAX_SCORE = 100
RECOMMENDED_SCORE = 70
ACTIVE_EXERCISE_DAYS = 3

CHRONIC_FEATURE_KEYWORDS = ("chronic", "disease", "specialist")
FITNESS_FEATURE_KEYWORDS = ("fitness", "wellness", "sports")

# Activity discount, whole percentage points
MAX_ACTIVITY_DISCOUNT = 30
HEALTH_SCORE_DISCOUNTS = ((90, 15), (80, 12), (70, 10), (60, 7))
EXERCISE_DAY_DISCOUNTS = ((180, 8), (90, 5), (30, 2))
PREVENTIVE_CHECKUP_DISCOUNT = 3

INCOMPLETE_PROFILE_MESSAGE = (
    "Complete your health profile to see your personalized risk assessment."
)
