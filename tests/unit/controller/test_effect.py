"""Tests for DependencyEffect."""

from unittest.mock import Mock

from proactive_audio.controller.effect import DependencyEffect


class TestDependencyEffect:
    def test_first_run_applies(self):
        callback = Mock()
        effect = DependencyEffect(callback)

        assert effect.run(("a", "b")) is True
        callback.assert_called_once_with()
        assert effect.dependencies == ("a", "b")

    def test_unchanged_dependencies_skip(self):
        callback = Mock()
        effect = DependencyEffect(callback)
        deps = (object(), object())

        effect.run(deps)
        assert effect.run(deps) is False

        assert callback.call_count == 1
        assert effect.run_count == 1

    def test_changed_dependency_reapplies(self):
        callback = Mock()
        effect = DependencyEffect(callback)
        first, second = object(), object()

        effect.run((first, second))
        effect.run((first, object()))

        assert callback.call_count == 2

    def test_bound_methods_of_same_object_are_unchanged(self):
        class Session:
            def set_model(self, model):
                pass

        session = Session()
        callback = Mock()
        effect = DependencyEffect(callback)

        effect.run((session.set_model,))
        effect.run((session.set_model,))

        assert callback.call_count == 1

    def test_length_change_reapplies(self):
        callback = Mock()
        effect = DependencyEffect(callback)

        effect.run(("a",))
        effect.run(("a", "b"))

        assert callback.call_count == 2

    def test_reset_forces_next_run(self):
        callback = Mock()
        effect = DependencyEffect(callback)

        effect.run(("a",))
        effect.reset()
        effect.run(("a",))

        assert callback.call_count == 2
        assert effect.dependencies == ("a",)
