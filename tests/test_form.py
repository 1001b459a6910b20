from primeweb.form import FieldErrors, Form


def test_form_has():
    form = Form(None)
    assert form.has("age") is False

    form = Form({"job": ["Software Engineer"]})
    assert form.has("job") is True


def test_form_has_plain_string_values():
    form = Form({"job": "Software Engineer", "empty": ""})
    assert form.has("job") is True
    assert form.has("empty") is False


def test_form_required():
    form = Form({})
    form.required("a", "b", "c")
    assert form.valid() is False
    assert form.errors.get("b") == "This field cannot be blank"

    form = Form({"a": ["a"], "b": ["b"], "c": ["c"]})
    form.required("a", "b", "c")
    assert form.valid() is True


def test_form_required_blank_whitespace():
    form = Form({"a": ["   "]})
    form.required("a")
    assert form.errors["a"] == ["This field cannot be blank"]


def test_form_check():
    form = Form(None)
    form.check(False, "password", "password is required")
    assert form.valid() is False


def test_form_check_passing_records_nothing():
    form = Form(None)
    form.check(True, "password", "password is required")
    assert form.valid() is True
    assert len(form.errors) == 0


def test_form_error_get():
    form = Form(None)
    form.check(False, "password", "password is required")
    assert form.errors.get("password") == "password is required"
    assert form.has("job") is False


def test_field_errors_keeps_order():
    errors = FieldErrors()
    errors.add("email", "first")
    errors.add("email", "second")
    assert errors.get("email") == "first"
    assert errors["email"] == ["first", "second"]
    assert errors.get("missing") == ""
    assert "email" in errors
    assert list(errors) == ["email"]


def test_form_uses_first_of_several_values():
    form = Form({"a": ["", "x"]})
    assert form.has("a") is False
    assert form.data["a"] == ["", "x"]