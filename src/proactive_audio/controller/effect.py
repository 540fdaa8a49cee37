from typing import Any, Callable, Optional, Sequence


def _same_dependencies(previous: Sequence[Any], current: Sequence[Any]) -> bool:
    # Bound methods compare equal when they wrap the same function on the same
    # object, so re-reading ``context.set_model`` is not treated as a change.
    if len(previous) != len(current):
        return False
    return all(a is b or a == b for a, b in zip(previous, current))


class DependencyEffect:
    """Runs a callback on first use and again whenever its dependencies change.

    The dependency tuple is committed before the callback runs, so a callback
    that raises is not retried until a dependency changes again.
    """

    def __init__(self, callback: Callable[[], None]):
        self._callback = callback
        self._dependencies: Optional[tuple[Any, ...]] = None
        self.run_count = 0

    @property
    def dependencies(self) -> Optional[tuple[Any, ...]]:
        return self._dependencies

    def run(self, dependencies: Sequence[Any]) -> bool:
        """Apply the callback if ``dependencies`` changed.

        Returns:
            True if the callback ran.
        """
        dependencies = tuple(dependencies)
        if self._dependencies is not None and _same_dependencies(
            self._dependencies, dependencies
        ):
            return False

        self._dependencies = dependencies
        self.run_count += 1
        self._callback()
        return True

    def reset(self) -> None:
        """Forget the committed dependencies; the next run always applies."""
        self._dependencies = None
