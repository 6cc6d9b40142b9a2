# ============================================
# tracker/models/choices.py
# ============================================
from django.db import models


class Stage(models.TextChoices):
    PRODUCT_CONCEPT = 'Product Concept', 'Product Concept'
    SCREEN_TEST = 'Screen Test', 'Screen Test'
    TESTING_VALIDATION = 'Testing Validation', 'Testing Validation'
    FIRST_BATCH = 'First Batch', 'First Batch'
    POST_LAUNCH = 'Post Launch', 'Post Launch'
    PROJECT_CLOSE = 'Project Close', 'Project Close'


class Priority(models.TextChoices):
    LOW = 'low', 'Low'
    MEDIUM = 'medium', 'Medium'
    HIGH = 'high', 'High'


# Display order of the workflow, first to last
STAGE_ORDER = tuple(Stage.values)
