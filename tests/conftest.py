"""Shared test fixtures for outline-nav tests."""

import pytest

from outline_nav.parser.hierarchy import build_outline
from outline_nav.parser.markdown import HeadingRecord


def records(*specs):
    """Build heading records from (level, title, line) tuples."""
    return [HeadingRecord(level=level, title=title, line=line) for level, title, line in specs]


class ScriptedProvider:
    """Selection provider that answers from a fixed list and records prompts."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = []

    def present(self, prompt, options):
        self.calls.append((prompt, list(options)))
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer


class RecordingJumper:
    """Jumper that remembers requested lines."""

    def __init__(self):
        self.lines = []

    def jump_to_line(self, line):
        self.lines.append(line)


@pytest.fixture
def scenario_a():
    """root -> A -> {B, C}; root -> D."""
    return build_outline(records((1, "A", 1), (2, "B", 2), (2, "C", 3), (1, "D", 4)))


@pytest.fixture
def jumper():
    return RecordingJumper()


@pytest.fixture
def sample_markdown():
    """Return sample markdown content with multiple heading levels."""
    return """# Getting Started

Welcome to the documentation.

## Installation

Install with pip:

```bash
pip install my-package
# not a heading
```

## Configuration

### Basic Config

Set environment variables:

- `API_KEY`: Your API key
- `DEBUG`: Enable debug mode

### Advanced Config

For production use, configure the following:

```yaml
server:
  host: 0.0.0.0
  port: 8080
```

## API Reference

### Authentication

Use Bearer tokens for API calls.

### Endpoints

#### GET /users

Returns a list of users.

#### POST /users

Create a new user.
"""


@pytest.fixture
def sample_mdx():
    """Return sample MDX content."""
    return """---
title: My Component Guide
description: How to use components
---

import { Callout } from '@components/Callout'
import Button from './Button'

# Component Guide

Welcome to the component guide.

## Using Callout

<Callout type="info">
This is an informational callout with important details.
</Callout>

## Buttons

<Button variant="primary" />

### Primary Button

The primary button is used for main actions.
"""


@pytest.fixture
def sample_rst():
    """Return sample RST content."""
    return """==============
User Guide
==============

Welcome to the user guide.

Installation
============

Install the package using pip::

    pip install my-package

Configuration
=============

Basic Setup
-----------

Set the following environment variables.

Advanced Setup
--------------

For production deployments, use the config file.

Nested Section
~~~~~~~~~~~~~~

This is a deeply nested section.
"""


@pytest.fixture
def doc_file(tmp_path, sample_markdown):
    """Write the sample markdown to a temporary README.md."""
    path = tmp_path / "README.md"
    path.write_text(sample_markdown)
    return path
