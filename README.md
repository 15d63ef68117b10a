# safehtml

Immutable, string-like value types whose contents are known to be safe,
by construction, escaping or sanitization, for use in particular HTML
contexts. Each value is a frozen dataclass holding its text in `value`;
`str(value)` gives the text back.

## Types

| Type         | Module                  | Safe for                                     |
|--------------|-------------------------|----------------------------------------------|
| `HTML`       | `safehtml.html`         | HTML content, such as `innerHTML`            |
| `Identifier` | `safehtml.identifier`   | element `id` / `name` attributes             |
| `JSON`       | `safehtml.safe_json`    | JSON documents                               |
| `Script`     | `safehtml.script`       | JavaScript, such as the body of a `<script>` |
| `Style`      | `safehtml.style`        | a sequence of CSS declarations               |
| `StyleSheet` | `safehtml.stylesheet`   | a whole CSS style sheet                      |

## Installation

```
pip install safehtml
```

The package has no runtime dependencies.

## Usage

```python
from safehtml.html import html_escaped, html_concat, html_from_constant
from safehtml.script import script_from_data_and_constant
from safehtml.style import StyleProperties, style_from_properties
from safehtml.stylesheet import css_rule
from safehtml.identifier import identifier_from_constant_prefix

greeting = html_escaped("<b>Tom & Jerry</b>")
page = html_concat(html_from_constant("<p>"), greeting, html_from_constant("</p>"))
print(page)  # <p>&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;</p>

script = script_from_data_and_constant(
    "msg", {"Greeting": "Hello", "Year": 3055}, "alert(msg['Greeting'])"
)
print(script)
# var msg = {"Greeting":"Hello","Year":3055};
# alert(msg['Greeting'])

style = style_from_properties(StyleProperties(color="#000", width="120px"))
print(style)  # color:#000;width:120px;

sheet = css_rule("#main", style)
print(sheet)  # #main{color:#000;width:120px;}

print(identifier_from_constant_prefix("row", "42"))  # row-42
```

### What each module offers

- `safehtml.html`: `html_from_constant`, `html_escaped` (escapes `&<>"'`
  after coercing the text to interchange-valid UTF-8), `html_concat`,
  `coerce_to_utf8_interchange_valid` and
  `escape_and_coerce_to_interchange_valid`. Control characters other than
  tab, line feed, form feed and carriage return, non-characters and lone
  surrogates become U+FFFD; `bytes` input gets one U+FFFD per undecodable
  byte.
- `safehtml.identifier`: `identifier_from_constant`,
  `identifier_from_constant_prefix`, `identifier_sanitized` (unsafe ids
  become `invalid:<uuid>`) and `is_safe_identifier`.
- `safehtml.safe_json`: `json_from_constant`, `json_from_value` (parses JSON
  text and re-encodes it compactly, with sorted object keys and `<`, `>`,
  `&` escaped), `json_escaped`, `empty_object_json`, `empty_array_json` and
  `json_concat`.
- `safehtml.script`: `script_from_constant`, `script_from_data_and_constant`
  and `is_js_identifier`. Data is encoded as compact JSON: mappings with
  sorted keys, dataclasses in field order, `bytes` as base64, and objects
  with a `__json__` method supply their own JSON text, which is validated.
- `safehtml.style`: `style_from_constant`, `StyleProperties`,
  `style_from_properties`, `css_escape_string` and
  `INNOCUOUS_PROPERTY_VALUE`.
- `safehtml.stylesheet`: `style_sheet_from_constant`, `css_rule` and
  `has_balanced_brackets`.

### Errors

Constructors that validate raise `ValueError` on bad input
(`identifier_from_constant`, `identifier_from_constant_prefix`,
`style_from_constant`, `css_rule`, `json_from_value`,
`script_from_data_and_constant`). `script_from_data_and_constant` raises
`TypeError` for data it cannot encode. Unsafe values in `StyleProperties`
are replaced with `zGoSafezInvalidPropertyValue`, and background image URLs
with an unsafe scheme with `about:invalid#zGoSafez`.

### URL helpers

`safehtml.safehtmlutil` provides `normalize_url`, `query_escape_url`,
`is_safe_trusted_resource_url_prefix`, `url_contains_double_dot_segment`,
`stringify` and `indirect`.

### Legacy conversions

`safehtml.legacyconversions` wraps plain strings in the safe types without
any checks: `riskily_assume_html`, `riskily_assume_script`,
`riskily_assume_style`, `riskily_assume_style_sheet` and
`riskily_assume_identifier`. It exists only to help migrate old code; new
code should not use it.

### Template support

`safehtml.template.context` models the HTML parser states used by a
contextual autosanitizer (`State`, `Delim`, `Element`, `Attr`, `Context`,
`is_comment`, `is_in_tag`), and `safehtml.template.errors` defines
`ErrorCode`, `TemplateError` and `errorf`.

## What this package does not do

- It has no template engine: there is nothing that parses or executes
  templates. The `safehtml.template` modules only hold the parser-context
  and error types such an engine would use.
- It has no URL or trusted-resource-URL value types; only the URL helper
  functions in `safehtml.safehtmlutil` are provided.

## Running the tests

```
pip install -e ".[test]"
pytest
```