"""Print a JSON AST produced by other GraphQL tooling (camelCase keys)."""

import json
import sys

from plume import PrintError, SerializationError, from_dict, print_ast

SAMPLE = {
    "kind": "Document",
    "definitions": [
        {
            "kind": "UnionTypeDefinition",
            "name": {"kind": "Name", "value": "SearchResult"},
            "types": [
                {"kind": "NamedType", "name": {"kind": "Name", "value": "User"}},
                {"kind": "NamedType", "name": {"kind": "Name", "value": "Repository"}},
            ],
        }
    ],
}

data = json.load(sys.stdin) if len(sys.argv) > 1 and sys.argv[1] == "-" else SAMPLE

try:
    print(print_ast(from_dict(data)), end="")
except (SerializationError, PrintError) as exc:
    sys.exit(f"error: {exc}")
