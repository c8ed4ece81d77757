#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Multi-Format Export CLI

Usage:
    mfexport render template.md --data data.json --format docx --format pdf
    mfexport render template.md --output-dir out/ --name meeting
    mfexport formats
"""

import sys
import json
import argparse
from pathlib import Path
from typing import List, Optional

from config.logging_config import set_log_level
from config.settings import settings
from multiformat_export.engine import MultiFormatExportEngine, OutputFormat
from multiformat_export.errors import ExportError


def load_data(path: Optional[str]) -> dict:
    """Load template data from a JSON file (empty when no path is given)"""
    if not path:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def cmd_render(args) -> int:
    """Render a template and export it to every requested format"""
    template_path = Path(args.template)
    if not template_path.exists():
        print(f"❌ Template not found: {template_path}")
        return 1

    try:
        data = load_data(args.data)
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ Cannot read data file: {e}")
        return 1

    formats: List[str] = args.format or [fmt.value for fmt in OutputFormat]
    name = args.name or template_path.stem
    output_dir = Path(args.output_dir)

    try:
        engine = MultiFormatExportEngine.from_settings(settings, formats)
        engine.register_template_string(name, template_path.read_text(encoding="utf-8"))
        markdown = engine.render(name, data)

        for fmt in formats:
            exported = engine.convert(markdown, fmt)
            path = exported.save(output_dir / exported.filename(name))
            print(f"✅ {fmt:>4}: {path} ({len(exported)} bytes)")
    except ExportError as e:
        print(f"❌ {e}")
        return 1

    return 0


def cmd_formats(args) -> int:
    """List formats with a registered exporter"""
    engine = MultiFormatExportEngine()
    for fmt in engine.supported_formats():
        exporter = engine.exporters[fmt]
        print(f"{fmt.value:>5}  {exporter.mime}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mfexport",
        description="Render a Markdown template to Markdown, HTML, DOCX and PDF",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('--log-level', default=None, help='Logging level (default: from settings)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Render command
    render_parser = subparsers.add_parser('render', help='Render a template and export it')
    render_parser.add_argument('template', help='Template file (Jinja2 syntax, Markdown output)')
    render_parser.add_argument('--data', '-d', help='JSON file with template data')
    render_parser.add_argument('--format', '-f', action='append',
                               choices=['md', 'markdown', 'html', 'pdf', 'docx'],
                               help='Output format (repeatable; default: all)')
    render_parser.add_argument('--output-dir', '-o', default='.', help='Output directory (default: .)')
    render_parser.add_argument('--name', '-n', help='Output file stem (default: template name)')

    # Formats command
    subparsers.add_parser('formats', help='List supported formats')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    set_log_level(args.log_level or settings.log_level)

    # Route to command handlers
    commands = {
        'render': cmd_render,
        'formats': cmd_formats,
    }

    handler = commands.get(args.command)
    if handler:
        return handler(args)
    else:
        print(f"Unknown command: {args.command}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
