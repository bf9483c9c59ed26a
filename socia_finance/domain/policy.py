"""Product-tuned thresholds and split ratios used by the calculators"""

# 3C split of a sale price: product cost / profit / business expenses
C3_PRODUCT_SHARE = 0.65
C3_PROFIT_SHARE = 0.30
C3_EXPENSE_SHARE = 0.05

# 50/30/20 rule rescaled once savings is carved out: needs:wants = 5:3
NEEDS_SHARE_OF_SPENDING = 0.625
WANTS_SHARE_OF_SPENDING = 0.375

# Profile defaults when a socia has not customized the percentages
DEFAULT_PCT_REPOSICION = 65.0
DEFAULT_PCT_GANANCIA = 30.0
DEFAULT_PCT_AHORRO = 20.0

# Cost assumed for a sale recorded without cost_price
DEFAULT_COST_RATIO = 0.70

# "Reto 0 a 10,000" target shown before a goal is configured
DEFAULT_TARGET_AMOUNT = 10_000.0

# Goal status bands (lower bound inclusive), highest first
PROGRESS_BANDS = (
    (100, "complete"),
    (76, "near"),
    (51, "halfway-plus"),
    (26, "started"),
    (0, "early"),
)

DAYS_PER_WEEK = 7
DAYS_PER_MONTH = 30
WEEKS_PER_MONTH = 4

# Client heuristics
DUE_SOON_WINDOW_DAYS = 3
INACTIVE_CLIENT_DAYS = 30
ACTIVE_CLIENT_DAYS = 30
OVERDUE_CREDIT_GRACE_DAYS = 15
SALE_NUDGE_DAYS = 3

# Margin assessment: within this many points below target is "improvable"
MARGIN_TOLERANCE_POINTS = 14

# Suggested markup classification (percent over cost)
MARKUP_COVERS_ALL_PCT = 50
MARKUP_CHECK_EXPENSES_PCT = 35

# A preference is healthy when both buckets keep at least this much
MIN_HEALTHY_REPOSICION_PCT = 50
MIN_HEALTHY_GANANCIA_PCT = 10

# Challenge guide scoring
GUIDE_WEEKS = 4
GUIDE_DAYS_PER_WEEK = 7
POINTS_PER_TASK = 10
POINTS_PER_FULL_WEEK = 30

# Credit schedule
DEFAULT_INSTALLMENT_INTERVAL_DAYS = 14
