import pytest

from mda_toolkit.core.component import BaseComponent, BaseStage, ComponentState
from mda_toolkit.core.exceptions import (
    ComponentInitializationError,
    DestroyedComponentError,
    StageProcessingError,
    UninitializedComponentError,
    UnmodifiableComponentError,
)


class CountingStage(BaseStage):
    """Stage recording how many items it has seen."""

    def __init__(self, component_id=None):
        super().__init__(component_id)
        self.seen = []
        self._limit = None

    @property
    def limit(self):
        return self._limit

    @limit.setter
    def limit(self, value):
        self._check_modifiable()
        self._limit = value
        self._mark_configured()

    def do_execute(self, items):
        for item in items:
            self.seen.append(item)


class BrokenStage(BaseStage):
    def do_execute(self, items):
        raise KeyError("boom")


class FailingStage(BaseStage):
    def do_execute(self, items):
        raise StageProcessingError("cannot continue", self.id)


class TestLifecycle:
    """State transitions and the guards that depend on them."""

    def test_state_progression(self):
        stage = CountingStage()
        assert stage.state is ComponentState.UNCONFIGURED
        stage.id = "counting"
        assert stage.state is ComponentState.CONFIGURED
        stage.initialize()
        assert stage.state is ComponentState.INITIALIZED
        assert stage.initialized
        stage.destroy()
        assert stage.state is ComponentState.DESTROYED
        assert stage.destroyed

    def test_initialize_is_idempotent(self):
        stage = CountingStage("counting")
        stage.initialize()
        stage.initialize()
        assert stage.initialized

    def test_setter_after_initialize_fails(self):
        stage = CountingStage("counting")
        stage.initialize()
        with pytest.raises(UnmodifiableComponentError):
            stage.limit = 3

    def test_setter_after_destroy_fails(self):
        stage = CountingStage("counting")
        stage.destroy()
        with pytest.raises(DestroyedComponentError):
            stage.limit = 3

    def test_initialize_after_destroy_fails(self):
        stage = CountingStage("counting")
        stage.destroy()
        with pytest.raises(DestroyedComponentError):
            stage.initialize()

    def test_execute_before_initialize_fails(self):
        stage = CountingStage("counting")
        with pytest.raises(UninitializedComponentError):
            stage.execute([])

    def test_execute_after_destroy_fails(self):
        stage = CountingStage("counting")
        stage.initialize()
        stage.destroy()
        with pytest.raises(DestroyedComponentError):
            stage.execute([])

    def test_stage_requires_id(self):
        stage = CountingStage()
        with pytest.raises(ComponentInitializationError):
            stage.initialize()
        assert not stage.initialized

    def test_base_component_needs_no_id(self):
        component = BaseComponent()
        component.initialize()
        assert component.initialized

    def test_destroy_twice_is_harmless(self):
        stage = CountingStage("counting")
        stage.destroy()
        stage.destroy()
        assert stage.destroyed


class TestConfigure:
    def test_configure_sets_properties(self):
        stage = CountingStage().configure(id="counting", limit=5)
        assert stage.id == "counting"
        assert stage.limit == 5

    def test_configure_rejects_unknown_names(self):
        with pytest.raises(ComponentInitializationError):
            CountingStage().configure(colour="blue")

    def test_configure_rejects_read_only_properties(self):
        with pytest.raises(ComponentInitializationError):
            CountingStage().configure(state=ComponentState.INITIALIZED)


class TestExecute:
    def test_items_processed_in_order(self, make_item):
        items = [make_item("<a/>"), make_item("<b/>"), make_item("<c/>")]
        stage = CountingStage("counting")
        stage.initialize()
        stage.execute(items)
        assert [i.unwrap().tag for i in stage.seen] == ["a", "b", "c"]

    def test_unexpected_errors_become_processing_errors(self):
        stage = BrokenStage("broken")
        stage.initialize()
        with pytest.raises(StageProcessingError) as info:
            stage.execute([])
        assert isinstance(info.value.__cause__, KeyError)
        assert "[Component: broken]" in str(info.value)

    def test_processing_errors_propagate_unchanged(self):
        stage = FailingStage("failing")
        stage.initialize()
        with pytest.raises(StageProcessingError, match="cannot continue"):
            stage.execute([])


class RaisingStage(BaseStage):
    """Stage raising whatever exception it was given."""

    def __init__(self, component_id, error):
        super().__init__(component_id)
        self.error = error

    def do_execute(self, items):
        raise self.error


class TestExceptionWrapping:
    """Only stage-processing failures reach the caller."""

    @pytest.mark.parametrize("error", [RuntimeError("boom"), OSError("disk"), ArithmeticError("nan")])
    def test_any_exception_is_wrapped(self, error):
        stage = RaisingStage("raising", error)
        stage.initialize()
        with pytest.raises(StageProcessingError) as info:
            stage.execute([])
        assert info.value.__cause__ is error
        assert info.value.cause is error

    def test_visitor_failure_is_wrapped(self, make_item):
        from mda_toolkit.core.dom import DOMTraversalStage

        stage = DOMTraversalStage("dividing", applicable=lambda e: True, visit=lambda e, ctx: 1 / 0)
        stage.initialize()
        with pytest.raises(StageProcessingError) as info:
            stage.execute([make_item("<a/>")])
        assert isinstance(info.value.__cause__, ZeroDivisionError)
