#!/usr/bin/env python3
"""Convert Japanese text between plain and polite register.

Usage:
    # Plain -> polite, file to file
    python scripts/convert_register.py input.txt -o output.txt --to polite

    # Polite -> plain from stdin
    echo "今日は晴天です。" | python scripts/convert_register.py --to plain

    # With a config file and debug logging
    python scripts/convert_register.py input.txt --config config.json --verbose
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def convert_text(text: str, register: str, config=None) -> str:
    """Convert text with a tokenizer and converter built from config.

    Args:
        text: Input text.
        register: "polite" or "plain".
        config: Loaded Config. Uses defaults if not provided.

    Returns:
        Converted text.
    """
    from desumasu.config import Config
    from desumasu.register import Register, RegisterConverter
    from desumasu.tokenizer import create_tokenizer

    config = config or Config()
    converter = RegisterConverter(create_tokenizer(config.tokenizer), config)

    # Convert line by line so blank lines and layout survive untouched
    lines = []
    for line in text.splitlines(keepends=True):
        body = line.rstrip()
        ending = line[len(body):]
        if body.strip():
            body = converter.convert(body, Register(register)).text
        lines.append(body + ending)
    return "".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Convert Japanese text between plain and polite register",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("input", nargs="?", help="Input file (default: stdin)")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument(
        "--to",
        choices=["polite", "plain"],
        default="polite",
        help="Target register (default: polite)",
    )
    parser.add_argument("--config", help="Path to config.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    parser.add_argument("--json-logs", action="store_true", help="Emit logs as JSON")

    args = parser.parse_args()

    from desumasu.config import Config, load_config
    from desumasu.errors import RegisterError
    from desumasu.utils.logging import setup_logging

    try:
        config = load_config(args.config) if args.config else Config()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    # Flags win; a config file supplies the defaults
    if args.verbose:
        level = "DEBUG"
    elif args.config:
        level = config.log_level
    else:
        level = "WARNING"
    setup_logging(level=level, json_format=args.json_logs or config.log_json)

    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            print(f"Error: Input file not found: {input_path}", file=sys.stderr)
            sys.exit(1)
        text = input_path.read_text(encoding="utf-8")
    else:
        text = sys.stdin.read()

    try:
        result = convert_text(text, args.to, config)
    except (RegisterError, RuntimeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.output:
        Path(args.output).write_text(result, encoding="utf-8")
        print(f"Saved to: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(result)


if __name__ == "__main__":
    main()
