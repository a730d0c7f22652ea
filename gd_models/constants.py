from __future__ import annotations

"""
Default hyperparameters for each experiment and the built-in toy datasets.
"""

REPORT_EVERY = 100
LOG_EPSILON = 1e-10
INIT_SCALE = 0.5

# (learning rate, epochs) per experiment
LINEAR_DEFAULTS = (0.03, 1000)
LOGISTIC_DEFAULTS = (0.1, 1000)
MULTI_DEFAULTS = (0.01, 500)
UNIFIED_DEFAULTS = (0.01, 1000)
PIPELINE_DEFAULTS = (0.01, 500)

# y = 2x, perfectly linear
LINEAR_TOY_X = [1.0, 2.0, 3.0, 4.0, 5.0]
LINEAR_TOY_Y = [2.0, 4.0, 6.0, 8.0, 10.0]
LINEAR_TOY_QUERY = 7.0

# class flips between 3 and 4
LOGISTIC_TOY_X = [1.0, 2.0, 3.0, 4.0, 5.0]
LOGISTIC_TOY_Y = [0, 0, 0, 1, 1]
LOGISTIC_TOY_QUERIES = (2.5, 4.5)

HOUSING_FEATURES = ["sqft", "bedrooms", "bathrooms", "laundry"]
HOUSING_QUERY = [1000.0, 2.0, 2.0, 1.0]
INCOME_FEATURES = ["education", "age", "experience", "is_urban"]
INCOME_QUERY = [13.0, 19.0, 1.0, 0.0]
PIPELINE_BINARY_COLUMNS = [True, False, False]
PIPELINE_QUERY = [1.0, 2.5, 3.0]
