import io

import pytest

from confcheck.junit import JUnit
from confcheck.result import CheckResult, CheckResults, ReportNotSupportedError, Result

VERSION = "9.9.9"
LONG = "failure with long message\n\nThis is the rest of the description of the failed test"


def _run(results, hide_message=False):
    buf = io.StringIO()
    JUnit(writer=buf, hide_message=hide_message, version=VERSION).output(CheckResults(results))
    return buf.getvalue()


def test_no_warnings_or_failures():
    result = CheckResult(file_name="examples/kubernetes/service.yaml", namespace="namespace")
    assert _run([result]) == '<?xml version="1.0" encoding="UTF-8"?>\n<testsuites></testsuites>\n'


def test_warning_failure_and_skipped():
    result = CheckResult(
        file_name="examples/kubernetes/service.yaml",
        namespace="namespace",
        warnings=[Result(message="first warning")],
        failures=[Result(message="first failure")],
        skipped=[Result(message="first skipped")],
    )
    expected = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        "<testsuites>",
        '\t<testsuite tests="3" failures="2" time="0.000" name="conftest.namespace">',
        "\t\t<properties>",
        f'\t\t\t<property name="python.version" value="{VERSION}"></property>',
        "\t\t</properties>",
        '\t\t<testcase classname="conftest.namespace" name="examples/kubernetes/service.yaml - first warning" time="0.000">',
        '\t\t\t<failure message="Failed" type="">first warning</failure>',
        "\t\t</testcase>",
        '\t\t<testcase classname="conftest.namespace" name="examples/kubernetes/service.yaml - first failure" time="0.000">',
        '\t\t\t<failure message="Failed" type="">first failure</failure>',
        "\t\t</testcase>",
        '\t\t<testcase classname="conftest.namespace" name="examples/kubernetes/service.yaml - first skipped" time="0.000">',
        '\t\t\t<skipped message="first skipped"></skipped>',
        "\t\t</testcase>",
        "\t</testsuite>",
        "</testsuites>",
        "",
    ]
    assert _run([result]) == "\n".join(expected)


@pytest.mark.parametrize(
    "hide_message, name",
    [
        (False, "examples/kubernetes/service.yaml - failure with long message"),
        (True, "examples/kubernetes/service.yaml"),
    ],
)
def test_long_failure_message(hide_message, name):
    result = CheckResult(
        file_name="examples/kubernetes/service.yaml",
        namespace="namespace",
        failures=[Result(message=LONG)],
    )
    expected = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        "<testsuites>",
        '\t<testsuite tests="1" failures="1" time="0.000" name="conftest.namespace">',
        "\t\t<properties>",
        f'\t\t\t<property name="python.version" value="{VERSION}"></property>',
        "\t\t</properties>",
        f'\t\t<testcase classname="conftest.namespace" name="{name}" time="0.000">',
        '\t\t\t<failure message="Failed" type="">failure with long message&#xA;&#xA;This is the rest of the description of the failed test</failure>',
        "\t\t</testcase>",
        "\t</testsuite>",
        "</testsuites>",
        "",
    ]
    assert _run([result], hide_message=hide_message) == "\n".join(expected)


def test_successes_are_empty_testcases():
    result = CheckResult(file_name="a.yaml", namespace="main", successes=2)
    lines = _run([result]).splitlines()
    assert lines[2] == '\t<testsuite tests="2" failures="0" time="0.000" name="conftest.main">'
    case = '\t\t<testcase classname="conftest.main" name="a.yaml" time="0.000"></testcase>'
    assert lines[6:8] == [case, case]


def test_special_characters_escaped():
    result = CheckResult(file_name="a", namespace="main", failures=[Result(message='<x & "y">')])
    assert "&lt;x &amp; &#34;y&#34;&gt;</failure>" in _run([result])


def test_format_test_name():
    junit = JUnit(writer=io.StringIO())
    assert junit.format_test_name("f.yaml", "first\nsecond") == "f.yaml - first"
    assert junit.format_test_name("f.yaml", "") == "f.yaml"


def test_report_not_supported():
    with pytest.raises(ReportNotSupportedError, match="report is not supported in JUnit output"):
        JUnit(writer=io.StringIO()).report([], "full")