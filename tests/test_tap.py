import io

import pytest

from confcheck.result import CheckResult, CheckResults, ReportNotSupportedError, Result
from confcheck.tap import TAP

FILE = "examples/kubernetes/service.yaml"


@pytest.mark.parametrize(
    "results, expected",
    [
        ([CheckResult(file_name=FILE, namespace="namespace")], []),
        (
            [
                CheckResult(
                    file_name=FILE,
                    namespace="namespace",
                    warnings=[Result("first warning")],
                    failures=[Result("first failure")],
                )
            ],
            [
                "1..2",
                f"not ok 1 - {FILE} - namespace - first failure",
                "# warnings",
                f"not ok 2 - {FILE} - namespace - first warning",
                "",
            ],
        ),
        (
            [
                CheckResult(
                    file_name=FILE,
                    namespace="namespace",
                    failures=[Result("first failure")],
                    skipped=[Result("first skipped")],
                )
            ],
            [
                "1..2",
                f"not ok 1 - {FILE} - namespace - first failure",
                "# skip",
                f"ok 2 - {FILE} - namespace - first skipped",
                "",
            ],
        ),
        (
            [CheckResult(file_name="-", namespace="namespace", failures=[Result("first failure")])],
            ["1..1", "not ok 1 - - namespace - first failure", ""],
        ),
    ],
    ids=["no warnings or errors", "failure and warnings", "failure and skipped", "stdin"],
)
def test_tap_output(results, expected):
    buf = io.StringIO()
    TAP(buf).output(CheckResults(results))
    assert buf.getvalue() == "\n".join(expected)


def test_tap_exceptions_and_successes():
    buf = io.StringIO()
    TAP(buf).output(
        CheckResults(
            [CheckResult(file_name="a.yaml", namespace="main", successes=1, exceptions=[Result("ex")])]
        )
    )
    assert buf.getvalue() == "\n".join(
        [
            "1..2",
            "# exceptions",
            "ok 1 - a.yaml - main - ex",
            "# successes",
            "ok 2 - a.yaml - main - SUCCESS",
            "",
        ]
    )


def test_tap_stops_at_empty_result():
    buf = io.StringIO()
    TAP(buf).output(
        CheckResults(
            [
                CheckResult(file_name="a.yaml", namespace="main"),
                CheckResult(file_name="b.yaml", namespace="main", failures=[Result("x")]),
            ]
        )
    )
    assert buf.getvalue() == ""


def test_tap_report_not_supported():
    with pytest.raises(ReportNotSupportedError, match="report is not supported in TAP output"):
        TAP(io.StringIO()).report([], "full")