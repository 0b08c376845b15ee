from cucumber_parallel.utils.errors import Err, GeneratorError


def test_write_failure_names_the_path() -> None:
    err = GeneratorError(Err.IO_ERROR, ctx={"op": "write", "path": "out/Parallel01IT.java"})
    assert err.code is Err.IO_ERROR
    assert err.path == "out/Parallel01IT.java"
    assert err.headline() == "cannot write out/Parallel01IT.java"
    assert str(err) == "IO_ERROR (cannot write out/Parallel01IT.java)"


def test_read_failure_includes_cause() -> None:
    err = GeneratorError(Err.IO_ERROR, ctx={"op": "read", "path": "features/a.feature"}, cause=OSError("gone"))
    assert str(err) == "IO_ERROR (cannot read features/a.feature): gone"
    assert err.__cause__ is err.cause


def test_missing_template_headline() -> None:
    err = GeneratorError(Err.MISSING_TEMPLATE, ctx={"template_id": "junit", "path": "t/junit.java.j2"})
    assert err.headline() == "runner template not found: t/junit.java.j2"
    assert "template_id='junit'" in str(err)


def test_config_error_lists_context() -> None:
    err = GeneratorError(Err.INVALID_CONFIG, ctx={"field": "naming_scheme", "value": "camel"})
    assert str(err) == "INVALID_CONFIG (invalid configuration): field='naming_scheme', value='camel'"


def test_error_without_ctx_uses_code_description() -> None:
    err = GeneratorError(Err.INVALID_CONFIG)
    assert err.ctx == {}
    assert err.path is None
    assert str(err) == "INVALID_CONFIG (invalid configuration)"
