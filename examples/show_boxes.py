import argparse
import json
import sys
import os

# Ensure project root is on sys.path when running this file directly
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from skelforge.debug.visualize import draw_metadata
from skelforge.dom import element_from_snapshot, scan
from skelforge.spec import generate_live_spec, serialize


def main():
    parser = argparse.ArgumentParser(description="Render scanned boxes from a browser snapshot (see SNAPSHOT_JS).")
    parser.add_argument("--snapshot", required=True, help="Path to snapshot JSON")
    parser.add_argument("--image", default=None, help="Optional screenshot to draw on")
    parser.add_argument("--out", default="debug_boxes.png", help="Path to save the overlay image")
    parser.add_argument("--spec", action="store_true", help="Also print the live skeleton spec")
    args = parser.parse_args()

    with open(args.snapshot, "r", encoding="utf-8") as f:
        root = element_from_snapshot(json.load(f))

    out_path = draw_metadata(scan(root), args.out, image_path=args.image)
    print("Saved:", out_path)
    if args.spec:
        print(serialize(generate_live_spec(root)))


if __name__ == "__main__":
    main()
