"""
Generate a sample steps.txt with one daily step count per line.
"""
import argparse
import random
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(description="Write random daily step counts")
    parser.add_argument("--output", default="steps.txt", help="Output file (default: steps.txt)")
    parser.add_argument("--days", type=int, default=30, help="Number of days (default: 30)")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    args = parser.parse_args()

    rng = random.Random(args.seed)
    values = [rng.randint(2000, 15000) for _ in range(args.days)]

    path = Path(args.output)
    path.write_text("\n".join(str(v) for v in values) + "\n", encoding="utf-8")
    print(f"Wrote {len(values)} values to {path}")


if __name__ == "__main__":
    main()
