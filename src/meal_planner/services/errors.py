"""Errors raised by application services."""


class MealPlannerError(Exception):
    """Base class for service errors surfaced to API clients."""


class NotFoundError(MealPlannerError):
    """The requested entity does not exist or is not visible to the user."""


class ConflictError(MealPlannerError):
    """The request collides with existing data."""


class PermissionDeniedError(MealPlannerError):
    """The user may not perform this action."""


class AuthenticationError(MealPlannerError):
    """Missing or invalid credentials."""
