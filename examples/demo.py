"""
Basic usage demonstration for jsonrevive.
"""

from datetime import date

import jsonrevive
from jsonrevive import ABSENT, ParseConfig


def main():
    print("jsonrevive - Basic Demo")
    print("=" * 23)

    print("\n1. Plain parsing")
    print(jsonrevive.parse('{"name": "widget", "sizes": [1, 2.5], "active": true}'))

    print("\n2. Reviver turning ISO dates into date objects")

    def dates(key, value):
        if isinstance(key, str) and key.endswith("_on"):
            return date.fromisoformat(value)
        return value

    print(jsonrevive.parse('{"created_on": "2024-03-01", "count": 3}', dates))

    print("\n3. Reviver dropping private keys")
    print(
        jsonrevive.parse(
            '{"user": "ada", "_token": "secret", "prefs": {"_cache": 1, "theme": "dark"}}',
            lambda key, value: ABSENT if str(key).startswith("_") else value,
        )
    )

    print("\n4. Reviver with access to the holder")

    def totals(holder, key, value):
        if key == "total":
            return sum(holder["items"])
        return value

    print(
        jsonrevive.parse(
            '{"items": [1, 2, 3], "total": null}',
            totals,
            config=ParseConfig(pass_holder=True),
        )
    )


if __name__ == "__main__":
    main()
