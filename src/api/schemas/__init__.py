# This file marks the schemas package for API request and response models.
# Shared pydantic models keep the HTTP contract explicit and reviewable.
