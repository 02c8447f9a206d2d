# tfdocs

`tfdocs` is the data model behind the documentation of a Terraform module. It describes the module's inputs, outputs, called modules, providers, requirements and resources. It has helpers to order these items and to render values as JSON, XML and YAML. It also reads output values from `terraform output -json`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Values and types

`tfdocs.types` wraps plain Python values in typed `Value` objects:

| Type | Used for |
| --- | --- |
| `Nil` | no value |
| `String` | a non-empty string |
| `Empty` | the empty string |
| `Number` | a number |
| `Bool` | a boolean |
| `List` | a list |
| `Map` | a mapping |

Every value has these methods:

- `has_default()`
- `length()`
- `raw()`
- `to_json()`
- `to_xml(tag)`
- `to_yaml()`

```python
from tfdocs.types import value_of, type_of

v = value_of(["a", "b"])
v.has_default()      # True
v.to_json()          # '["a","b"]'
v.to_xml("default")  # '<default><item>a</item><item>b</item></default>'
str(type_of("", 42)) # 'number'
```

How each value type is rendered:

- **`Nil`**: `null` in JSON; an element with `xsi:nil="true"` in XML; `None` for YAML.
- **Empty `String`**: rendered the same way as `Nil`.
- **`Empty`**: always `""` in JSON.
- **`Map`**: keys are written in sorted order in JSON. In XML, each key becomes its own element.

`type_of(t, v)` returns `t` when it is given. Otherwise it guesses one of `string`, `bool`, `number`, `list`, `map` or `any` from the value.

## Module items

Each kind of item is a dataclass:

| Class | Module | Members |
| --- | --- | --- |
| `Position` | `tfdocs.position` | file name and line |
| `Input` | `tfdocs.inputs` | `get_value()`, `has_default()` |
| `Output` | `tfdocs.outputs` | `get_value()`, `has_default()`, `to_json()`, `to_xml(tag)`, `to_yaml()` |
| `OutputValue` | `tfdocs.outputs` | one entry of `terraform output -json` |
| `ModuleCall` | `tfdocs.modulecall` | `full_name()` |
| `Provider` | `tfdocs.provider` | `full_name()` |
| `Requirement` | `tfdocs.requirement` | |
| `Resource` | `tfdocs.resource` | `spec()`, `get_mode()`, `url()` |

An `Output` shows its value only when `show_value` is set. When it is not set, `value` and `sensitive` are left out of the JSON, XML and YAML forms.

Sort helpers return new lists:

- `inputs_sorted_by_name`, `inputs_sorted_by_required`, `inputs_sorted_by_position`, `inputs_sorted_by_type`
- `outputs_sorted_by_name`, `outputs_sorted_by_position`
- `modulecalls_sorted_by_name`, `modulecalls_sorted_by_source`, `modulecalls_sorted_by_position`
- `providers_sorted_by_name`, `providers_sorted_by_position`
- `resources_sorted_by_type`: managed resources first, then data sources, each ordered by address

```python
from tfdocs.resource import Resource

r = Resource(type="private_key", name="baz", provider_name="tls",
             provider_source="hashicorp/tls", mode="managed", version="latest")
r.spec()      # 'tls_private_key.baz'
r.get_mode()  # 'resource'
r.url()       # registry documentation link for this resource
```

## Options

`tfdocs.options.new_options()` returns the default `Options`:

- the header is shown and read from `main.tf`;
- the footer is off;
- the lock file is used;
- output values are off;
- `SortBy` has every criterion off, so items are ordered by position.

There are two ways to combine option sets:

- `Options.merge(override)` fills in only the fields that are still empty: `""`, `False` or `None`.
- `Options.merge_overwrite(override)` replaces fields with every non-empty value of `override`.

Both methods raise `ValueError` when `override` is `None`.

## Module helpers

`tfdocs.module` provides the following:

- **`Module`** holds every list of items, together with `required_inputs` and `optional_inputs`. It has predicates such as `has_header()`, `has_inputs()` and `has_resources()`.
- **`get_file_format(filename)`** returns the extension, including the dot.
- **`is_file_format_supported(filename, section)`** accepts `.adoc`, `.md`, `.tf` and `.txt`. For anything else it raises `ValueError`.
- **`format_source(source, version)`** splits a `?ref=` suffix off a module source, unless a version is already given.
- **`resource_version(constraints)`** returns the exact version pinned by the last constraint, or `latest`.
- **`load_output_values(options)`** reads `options.output_values_path` when it is set. Otherwise it runs `terraform output -json` in `options.path`, which needs `terraform` on the `PATH`. A read or run failure raises `RuntimeError`.
- **`sort_items(module, sort_by)`** orders every list of a `Module` in place, according to a `SortBy`.

## Version

```python
from tfdocs.version import core, short, full
core()            # '0.15.0'
short()           # '0.15.0-alpha'
full("abc1234")   # 'v0.15.0-alpha abc1234 <os>/<arch>'
```

## What it does not do

- It does not parse Terraform configuration files, `.terraform.lock.hcl` files, or header and footer comments. A `Module` and its items must be built by the caller.
- It has no command-line tool.
- It does not render whole documents, such as Markdown tables. Rendering is limited to the per-value and per-output JSON, XML and YAML forms described above.