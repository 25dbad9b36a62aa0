import pytest

from jscheck.validators.context import EngineContext
from jscheck.validators.exceptions import EngineInitializationError
from jscheck.validators.ruleset import DEFAULT_RULESET, clear_cache, load_ruleset

from tests.fakes import FakeEngine


def test_bundled_ruleset_is_packaged():
    ruleset = load_ruleset()
    assert ruleset.path == DEFAULT_RULESET
    assert "var JSHINT" in ruleset.source
    assert ruleset.source.rstrip().endswith("//# sourceURL=jshint.js")


def test_ruleset_reads_are_cached(tmp_path):
    program = tmp_path / "rules.js"
    program.write_text("var JSHINT = function () { return true; };", encoding="utf-8")
    first = load_ruleset(program)
    program.write_text("var JSHINT = null;", encoding="utf-8")
    assert load_ruleset(str(program)) is first
    clear_cache()
    assert "null" in load_ruleset(program).source


def test_missing_ruleset(tmp_path):
    with pytest.raises(EngineInitializationError, match="Failed reading"):
        load_ruleset(tmp_path / "absent.js")


def test_empty_ruleset(tmp_path):
    program = tmp_path / "empty.js"
    program.write_text("  \n", encoding="utf-8")
    with pytest.raises(EngineInitializationError, match="empty"):
        load_ruleset(program)


def test_lazy_single_initialization(fake_context, fake_engine):
    assert not fake_context.initialized
    first = fake_context.ensure_initialized()
    second = fake_context.ensure_initialized()
    assert first is second is fake_engine
    assert len(fake_engine.programs) == 1
    assert fake_engine.programs[0][1] == "jshint.js"
    assert fake_context.initialized


def test_prebuilt_scope_skips_loading(settings):
    engine = FakeEngine()
    context = EngineContext.from_engine(engine, settings=settings)
    assert context.initialized
    assert context.ensure_initialized() is engine
    assert engine.programs == []


def test_unloaded_engine_gets_the_program(settings):
    engine = FakeEngine()
    context = EngineContext(engine=engine, settings=settings)
    assert context.ensure_initialized() is engine
    assert len(engine.programs) == 1


def test_session_yields_initialized_engine(fake_context, fake_engine):
    with fake_context.session() as engine:
        assert engine is fake_engine
        with fake_context.session() as nested:
            assert nested is engine


def test_load_failure_is_initialization_error(settings):
    context = EngineContext(engine_factory=lambda: FakeEngine(fail_on="load"), settings=settings)
    with pytest.raises(EngineInitializationError, match="Failed evaluating"):
        context.ensure_initialized()
    assert not context.initialized


def test_missing_entrypoint_is_initialization_error(settings):
    engine = FakeEngine()
    engine.has_global = lambda name: False
    context = EngineContext(engine_factory=lambda: engine, settings=settings)
    with pytest.raises(EngineInitializationError, match="does not define 'JSHINT'"):
        context.ensure_initialized()


def test_factory_failure_is_initialization_error(settings):
    def broken_factory():
        raise OSError("libmini_racer.so not found")

    context = EngineContext(engine_factory=broken_factory, settings=settings)
    with pytest.raises(EngineInitializationError, match="libmini_racer"):
        context.ensure_initialized()


def test_configured_ruleset_path(tmp_path, settings):
    program = tmp_path / "custom.js"
    program.write_text("var LINT = function () { return true; };", encoding="utf-8")
    custom = settings.model_copy(update={"RULESET_PATH": str(program), "RULESET_ENTRYPOINT": "LINT"})
    engine = FakeEngine()
    context = EngineContext(engine_factory=lambda: engine, settings=custom)
    context.ensure_initialized()
    assert context.entrypoint == "LINT"
    assert engine.programs[0][1] == "custom.js"


def test_reset_reloads(fake_context, fake_engine):
    fake_context.ensure_initialized()
    fake_context.reset()
    assert not fake_context.initialized
    fake_context.ensure_initialized()
    assert len(fake_engine.programs) == 2


def test_failed_scope_is_discarded(settings):
    fresh = FakeEngine()
    context = EngineContext(engine=FakeEngine(fail_on="load"), engine_factory=lambda: fresh, settings=settings)
    with pytest.raises(EngineInitializationError):
        context.ensure_initialized()
    assert context.ensure_initialized() is fresh
    assert len(fresh.programs) == 1


def test_scope_without_entrypoint_is_discarded(settings):
    stale = FakeEngine()
    stale.has_global = lambda name: False
    fresh = FakeEngine()
    context = EngineContext(engine=stale, engine_factory=lambda: fresh, settings=settings)
    with pytest.raises(EngineInitializationError):
        context.ensure_initialized()
    assert context.ensure_initialized() is fresh
