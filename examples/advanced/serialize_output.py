"""Cache converted spans to disk: JSON round-trip."""

from tinta import convert
from tinta.serialization import from_json, to_json

doc = convert("Cached document\n===============\nThese spans can be **serialized** and restored.")

json_str = to_json(doc)
restored = from_json(json_str)

print("Original == restored:", doc == restored)
print("JSON length:", len(json_str), "chars")
