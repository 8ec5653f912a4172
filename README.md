# confcheck

Result models and report formatters for the output of configuration policy
checks. Each evaluated file gives a `CheckResult`. A `CheckResult` holds a
count of successes and lists of failures, warnings, exceptions and skipped
results. A `CheckResults` list can be written out in several formats. The
formats are chosen by name through `confcheck.outputs.get`:

| name          | class                               |
|---------------|-------------------------------------|
| `stdout`      | `confcheck.standard.Standard`       |
| `json`        | `confcheck.jsonout.JSON`            |
| `tap`         | `confcheck.tap.TAP`                 |
| `table`       | `confcheck.table.Table`             |
| `junit`       | `confcheck.junit.JUnit`             |
| `github`      | `confcheck.github.GitHub`           |
| `azuredevops` | `confcheck.azuredevops.AzureDevOps` |
| `sarif`       | `confcheck.sarif.SARIF`             |

`get` returns the `Standard` outputter for any name it does not know.

## Installation

```
pip install confcheck
```

The package needs nothing outside the standard library.

## Usage

```python
import sys

from confcheck.result import CheckResult, CheckResults, Result
from confcheck.outputs import Options, get, outputs

results = CheckResults([
    CheckResult(
        file_name="deployment.yaml",
        namespace="main",
        successes=3,
        warnings=[Result("Containers should not run as root")],
        failures=[Result("Memory limit is missing")],
    ),
])

outputter = get("table", Options(file=sys.stdout))
outputter.output(results)

print(outputs())                          # every supported format name
sys.exit(results.exit_code())             # 1 when any failure was found
```

The writer defaults to `sys.stdout` when `Options.file` is not set.
`Options` also holds `no_color`, `suppress_exceptions`, `tracing` and
`show_skipped`, which are passed to `Standard`, and `junit_hide_message`,
which is passed to `JUnit`.

`CheckResults.exit_code_fail_on_warn()` treats warnings as failures. It
returns 2 when there are failures, 1 when there are only warnings, and 0
otherwise. `Result.from_metadata(mapping)` builds a result from a rule's
returned object. The object must hold a string `msg`, and the other keys
become the result's metadata. A missing or non-string `msg` raises
`ValueError`.

## Notes on the formatters

- `Standard` prints `WARN`, `FAIL` and `EXCP` lines, then a summary line.
  The lines are coloured with ANSI escapes unless `no_color` is set. With
  `tracing=True` it prints the query traces instead. It has no `report()`
  method.
- `JSON`, `TAP`, `Table`, `JUnit`, `GitHub`, `AzureDevOps` and `SARIF` all
  raise `confcheck.result.ReportNotSupportedError` from `report()`.
- `JSON` replaces the stdin file name `-` with an empty string and leaves
  out the queries.
- `JUnit` writes one test suite per namespace. The suite records the running
  Python version in a `python.version` property.
- `SARIF` writes a SARIF 2.1.0 log with one run. It adds the driver's
  `informationUri` only when `information_uri` is given.
- `confcheck.table.render_table(header, rows)` renders any bordered table,
  and cells longer than 30 characters are wrapped.

## Other helpers

- `confcheck.network.hostname(ref)` returns the host of a registry
  reference, without any `oci://` prefix, port or path.
  `confcheck.network.is_loopback(host)` tells whether a host is a loopback
  address. For names it does not know, it resolves the host through the
  system resolver.
- `confcheck.oci_detector.OCIDetector().detect(src, pwd)` recognises OCI
  registry references. For example, `user.azurecr.io/policies` becomes
  `oci://user.azurecr.io/policies:latest`. It returns `None` for anything
  that is not a registry. It raises `DetectionError` for a registry host
  that has no path.
- `confcheck.document.convert_annotations_to_sections(refs)` turns a
  sequence of `AnnotationsRef` entries into `Section` entries. Each entry's
  path is a tuple such as `("data", "foo", "p")`. Each section gets a
  Markdown heading whose depth never goes up by more than one level from
  the section before it.

## What this package does not do

It has no command-line tool. It does not parse configuration files, and it
does not evaluate or format policies. It does not download policies or push
them to a registry. It does not read annotations from policy files, and it
does not render documentation pages. You build the results and the
annotation references yourself and pass them in.

## Running the tests

```
pip install confcheck[test]
pytest
```