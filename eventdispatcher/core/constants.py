"""Shared constants for listener budgets and argument validation messages."""

# max_calls sentinel: the listener is never evicted and its call count never moves
INFINITE_CALLS = -1

# Returned by budget/count queries when the type key or listener is not registered.
# Distinct from INFINITE_CALLS; zero is never a valid budget.
NOT_FOUND_CALLS = 0

ARGUMENT_IS_NULL = "Argument is null."
ARGUMENT_MAX_CALLS = "Argument is less or equal 0 (except -1)."
ARGUMENT_LISTENER_TYPE = "Listener is not an instance of the listener type."
