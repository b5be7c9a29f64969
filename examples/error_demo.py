"""
Error reporting demonstration for jsonrevive.
"""

import jsonrevive
from jsonrevive import JSONSyntaxError, ParseConfig, ParseLimits, SecurityError


def main():
    print("jsonrevive - Error Reporting Demo")
    print("=" * 33)

    samples = [
        ("Missing colon", '{"key" "value"}'),
        ("Trailing comma", "[1, 2, 3,]"),
        ("Unclosed object", '{"a": 1,'),
        ("Bad escape", '"tab\\q"'),
        ("Trailing text", '{"done": true} extra'),
    ]

    for number, (title, text) in enumerate(samples, 1):
        print(f"\n{number}. {title}")
        try:
            jsonrevive.parse(text)
        except JSONSyntaxError as e:
            print(f"name={e.name} message={e.message!r} at={e.at}")
            print(str(e))

    print(f"\n{len(samples) + 1}. Without context")
    try:
        jsonrevive.parse("[1 2]", config=ParseConfig(include_context=False))
    except JSONSyntaxError as e:
        print(str(e))

    print(f"\n{len(samples) + 2}. Resource limits")
    config = ParseConfig(limits=ParseLimits(max_nesting_depth=2))
    try:
        jsonrevive.parse("[[[1]]]", config=config)
    except SecurityError as e:
        print(f"SecurityError: {e}")


if __name__ == "__main__":
    main()
