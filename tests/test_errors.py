import pytest

from safehtml.template.errors import ErrorCode, TemplateError, errorf


def test_error_codes_keep_their_numbers():
    assert ErrorCode.OK == 0
    assert ErrorCode.AMBIG_CONTEXT == 1
    assert ErrorCode.BAD_HTML == 2
    assert ErrorCode.SLASH_AMBIG == 10
    assert ErrorCode.ESCAPE_ACTION == 12
    codes = [errorf(code, None, 0, "x").code for code in ErrorCode]
    assert [int(code) for code in codes] == list(range(len(ErrorCode)))


def test_string_without_location():
    err = TemplateError(ErrorCode.BAD_HTML, description="broken")
    assert str(err) == "html/template: broken"


def test_string_with_name():
    err = TemplateError(ErrorCode.END_CONTEXT, name="page", description="broken")
    assert str(err) == "html/template:page: broken"


def test_string_with_line():
    err = TemplateError(ErrorCode.END_CONTEXT, name="page", line=3, description="x")
    assert str(err) == "html/template:page:3: x"


def test_node_overrides_name_and_line():
    with_node = TemplateError(
        ErrorCode.AMBIG_CONTEXT, node="loc", name="page", line=3, description="d"
    )
    without_name = TemplateError(ErrorCode.AMBIG_CONTEXT, node="loc", description="d")
    assert str(with_node) == str(without_name)
    assert "page" not in str(with_node)
    assert str(with_node).endswith(": d")


def test_errorf_formats_description():
    err = errorf(ErrorCode.NO_SUCH_TEMPLATE, None, 0, "no such template %s", "t")
    assert err.description == "no such template t"
    assert err.code is ErrorCode.NO_SUCH_TEMPLATE
    assert err.name == ""
    assert err.line == 0


def test_errorf_without_args_keeps_percent_signs():
    err = errorf(ErrorCode.ESCAPE_ACTION, None, 7, "100% bad")
    assert err.description == "100% bad"
    assert err.line == 7


def test_name_can_be_filled_in_later():
    err = errorf(ErrorCode.BRANCH_END, None, 0, "branches differ")
    err.name = "main"
    assert str(err).startswith("html/template:main: ")


def test_template_error_is_raisable():
    err = errorf(ErrorCode.SLASH_AMBIG, None, 2, "%s could start %s", "/", "regexp")
    assert err.code is ErrorCode.SLASH_AMBIG
    assert err.description == "/ could start regexp"
    assert err.line == 2
    with pytest.raises(TemplateError) as info:
        raise err
    assert info.value is err