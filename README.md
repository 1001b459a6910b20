# primeweb

Two small tools in one package:

* **is-it-prime** – an interactive console program that tells you whether a
  whole number is prime, and if not, why.
* **A Flask web application** with a home page that remembers your first visit
  in the session, a login endpoint with form validation, static file serving,
  and client IP detection that honours `X-Forwarded-For`.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## The prime checker

```
is-it-prime
```

```
Is it prime?
------------
Enter a whole number, and check if its a prime or not. Enter q to quit
-> 7
7 is a prime number
-> 8
8 is not prime because it is divisible by 2
-> 1
1 is not prime by definition
-> -11
Negative numbers are not prime
-> abc
Please enter a whole number
-> q
Goodbye.
```

Entering `q` or `Q` ends the session, and so does the end of input. Input that
is not a whole number, or that lies outside the signed 64-bit range, is
answered with "Please enter a whole number".

The same functions are available from Python (module `primeweb.prime`):

```python
from primeweb.prime import is_prime, check_number

is_prime(7)          # (True, "7 is a prime number")
is_prime(8)          # (False, "8 is not prime because it is divisible by 2")
is_prime(0)          # (False, "0 is not prime by definition")
check_number("q")    # ("", True)
check_number("9")    # ("9 is not prime because it is divisible by 3", False)
```

* `is_prime(n)` – a `(bool, message)` pair; the message names the smallest
  divisor when `n` is not prime.
* `check_number(line)` – the message for one line of input, and whether the
  user asked to quit.
* `intro(out)`, `prompt(out)` – write the welcome text and the `-> ` prompt to
  `out` (standard output by default).
* `read_user_input(lines, out)` – answer each line from an iterable of lines
  until the user quits or the lines run out.
* `main()` – what the `is-it-prime` command runs.

## Form validation

`primeweb.form.Form` wraps submitted form data (a mapping of strings or lists
of strings, or anything with `getlist`, such as Flask's `request.form`) and
collects errors per field in a `FieldErrors` mapping, `form.errors`:

* `Form.has(field)` – the field is present and its first value is non-empty.
* `Form.required(*fields)` – records "This field cannot be blank" for every
  listed field that is missing or only whitespace.
* `Form.check(ok, key, message)` – records `message` under `key` when `ok` is
  false.
* `Form.valid()` – true when no errors were recorded.
* `FieldErrors.get(field)` – the first error for a field, or an empty string.
* `FieldErrors.add(field, message)` – records an error for a field.

```python
from primeweb.form import Form

form = Form({"email": "someone@example.com"})
form.required("email", "password")
form.valid()                   # False
form.errors.get("password")    # "This field cannot be blank"
```

## Client IP detection

`primeweb.network.get_ip(remote_addr, headers)` splits a `host:port` (or
`[host]:port`) remote address, checks that the host is an IP address, and
prefers an `X-Forwarded-For` header when one is present; it raises
`ValueError` when the address cannot be used.
`resolve_client_ip(remote_addr, headers)` never fails: it falls back to the
host part of the address, or to `"unknown"`.

## The web application

```python
from primeweb.web import create_app

app = create_app("templates", "static")
app.run()
```

`create_app(template_dir, static_dir)` defaults to `./templates/` and
`./static/`. Routes:

| Method | Path        | Purpose                                                      |
|--------|-------------|--------------------------------------------------------------|
| GET    | `/`         | Home page; stores the time of the first visit in the session |
| POST   | `/login`    | Checks that `email` and `password` are filled in             |
| GET    | `/static/*` | Files from the static directory                              |

Before each request the client address is resolved with `resolve_client_ip`;
inside a request `ip_from_context()` returns it (and raises `LookupError` when
none was recorded).

`render(template_name, data)` renders a page template with Flask's template
engine, passing the client IP as `IP` and the data as `Data`. Both the page
template and `base.layout.gohtml` must exist in the template directory;
otherwise the answer is `400 bad request`. The home page uses
`home.page.gohtml`.

`/login` answers `failed validation` when either field is blank, and otherwise
echoes the e-mail address back as plain text.

`configure_session(app)` makes sessions last 24 hours with persistent, secure,
`SameSite=Lax` cookies. If the app has no `secret_key`, a random one is set,
so sessions do not survive a restart unless you set your own key.

## What the package does not do

* It ships no templates or static files; supply `home.page.gohtml`,
  `base.layout.gohtml` and your assets yourself.
* The login endpoint only validates the form. It has no user store or
  database, checks no passwords and logs nobody in.
* There is no command that starts the web server; create the app in Python
  and run it with Flask or any WSGI server.