"""Pytest configuration and shared fixtures for the md2jira test suite.

This module provides shared fixtures, test configuration, and helpers that
are used across the entire test suite.
"""

import os

import pytest

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Phase, Verbosity, settings

    # Register custom Hypothesis profiles
    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=20)
    settings.register_profile(
        "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
    )

    # Load profile from environment or use default
    profile = os.getenv("HYPOTHESIS_PROFILE", "dev")
    settings.load_profile(profile)
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def clean_md2jira_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every MD2JIRA_* variable so the CLI only sees what a test sets."""
    for key in list(os.environ):
        if key.startswith("MD2JIRA_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def reference_markdown() -> str:
    """Provide a document exercising every construct the renderer handles.

    Returns
    -------
    str
        CommonMark text with headings, inline formatting, links, images,
        quotes, lists, rules and code blocks.

    """
    return """# Title One

This is a sample paragraph that has some text which is *emphasized* and some
other text which is **strong**. It also has `some code`, and
[has a link](https://example.com).

![An image](https://example.com)

---

## Subsection

> Paragraph 1.
>
> Paragraph 2.

1. Item one.
2. Item two.
3. Item three.

### Sub-subsection

* Item one.
* Item two.
* Item three.

``` ruby
def hello_world
  puts "hello world!"
end
```
"""


@pytest.fixture
def reference_jira() -> str:
    """Provide the JIRA markup expected for ``reference_markdown``."""
    return """h1. Title One

This is a sample paragraph that has some text which is _emphasized_ and some
other text which is *strong*. It also has {{some code}}, and
[has a link|https://example.com].

!https://example.com!

----

h2. Subsection

{quote}
Paragraph 1.

Paragraph 2.
{quote}

# Item one.
# Item two.
# Item three.

h3. Sub-subsection

* Item one.
* Item two.
* Item three.

{code:ruby}
def hello_world
  puts "hello world!"
end
{code}"""
