from pathlib import Path
import json, re, sys

SLUG_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

p = Path(sys.argv[1] if len(sys.argv) > 1 else "data/catalog/catalog.json")
data = json.loads(p.read_text())

ok = True
seen_slugs = set()
for i, ex in enumerate(data.get("exercises", []), start=1):
    # Required fields
    for key in ["slug","name"]:
        if not ex.get(key):
            ok = False
            print(f"[Exercise {i}] Missing '{key}'")

    slug = ex.get("slug", "")
    if slug and not SLUG_RE.match(slug):
        ok = False
        print(f"[Exercise {i}] slug '{slug}' must be lowercase words joined by '-'")
    if slug in seen_slugs:
        ok = False
        print(f"[Exercise {i}] duplicate slug '{slug}'")
    seen_slugs.add(slug)

seen_values = set()
for i, rpe in enumerate(data.get("rpe_values", []), start=1):
    for key in ["value","label"]:
        if key not in rpe:
            ok = False
            print(f"[RPE {i}] Missing '{key}'")

    value = rpe.get("value")
    if value is not None:
        if not isinstance(value, int) or not 1 <= value <= 10:
            ok = False
            print(f"[RPE {i}] value must be an integer 1..10, got {value!r}")
        elif value in seen_values:
            ok = False
            print(f"[RPE {i}] duplicate value {value}")
        seen_values.add(value)

if not data.get("exercises"):
    ok = False
    print("No exercises listed")

if ok:
    print(f"{p.name} looks good!")
else:
    sys.exit("Validation failed.")
