#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Pytest fixtures for integration tests.

Provides:
- report_markdown: A document touching every block and inline kind
"""

import pytest


@pytest.fixture
def report_markdown() -> str:
    return (
        "# Quarterly Report\n"
        "\n"
        "**Summary**\n"
        "Revenue grew by 12% this quarter.\n"
        "\n"
        "## Details\n"
        "\n"
        "1. Sales  \n"
        "   up in every region\n"
        "   - North\n"
        "   - South\n"
        "2. Costs `flat`\n"
        "\n"
        "```python\n"
        "total = 1 + 2\n"
        "print(total)\n"
        "```\n"
    )
