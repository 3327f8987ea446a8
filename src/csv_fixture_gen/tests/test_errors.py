from csv_fixture_gen.errors import Err, GeneratorError


def test_generator_error_str_includes_context() -> None:
    err = GeneratorError(Err.INVALID_ARGUMENT, ctx={"missing": ["number_of_rows"]})
    assert err.code is Err.INVALID_ARGUMENT
    assert "number_of_rows" in str(err)


def test_generator_error_without_ctx_defaults_to_name() -> None:
    err = GeneratorError(Err.IO_FAILURE)
    assert err.ctx == {}
    assert str(err) == "IO_FAILURE"


def test_generator_error_chains_cause() -> None:
    cause = PermissionError("denied")
    err = GeneratorError(Err.IO_FAILURE, ctx={"path": "/x"}, cause=cause)
    assert err.__cause__ is cause
