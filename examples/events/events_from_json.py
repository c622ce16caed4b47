"""Render events produced by some other parser, delivered as JSON."""

import json

from llano import parse_events, render_events
from llano.serialization import from_json, to_json

payload = json.dumps(
    [
        {"_type": "BlockStart", "kind": {"_type": "Heading", "level": 1}},
        {"_type": "Text", "content": "Release notes"},
        {"_type": "BlockEnd", "kind": {"_type": "Heading", "level": 1}},
        {"_type": "BlockStart", "kind": {"_type": "Paragraph"}},
        {"_type": "Text", "content": "Fixed   spacing"},
        {"_type": "BlockEnd", "kind": {"_type": "Paragraph"}},
    ]
)
print(render_events(from_json(payload)))

# The same format round-trips events parsed here
print(to_json(parse_events("*hi*"), indent=2))
