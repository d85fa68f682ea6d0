"""
`python -m scripts.recommend --weight 70 --height 175 --age 25 \
    --gender male --activity-level sedentary --goal weightLoss`

Prints the same JSON the /api/calculate endpoint returns. The diet plan
body is left out unless `--plan` is given.
"""
from __future__ import annotations

import argparse
import json
import math
import sys

from api.v1.schemas import RecResponse
from core.models import ActivityLevel
from core.nutrition_calc import (
    MAX_AGE,
    MAX_HEIGHT_CM,
    MAX_WEIGHT_KG,
    BiometricInput,
    RecommendationCalculator,
)


def _positive(kind, upper):
    def parse(raw: str):
        try:
            value = kind(raw)
        except ValueError:
            raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
        if not math.isfinite(value):
            raise argparse.ArgumentTypeError(f"must be finite: {raw!r}")
        if not 0 < value <= upper:
            raise argparse.ArgumentTypeError(f"must be in (0, {upper}]: {raw!r}")
        return value
    return parse


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="recommend", description="Print a diet recommendation as JSON.")
    ap.add_argument("--weight", type=_positive(float, MAX_WEIGHT_KG), required=True, help="kg")
    ap.add_argument("--height", type=_positive(float, MAX_HEIGHT_CM), required=True, help="cm")
    ap.add_argument("--age", type=_positive(int, MAX_AGE), required=True)
    ap.add_argument("--gender", required=True, help="'male'; anything else uses the female formula")
    ap.add_argument(
        "--activity-level",
        required=True,
        choices=[lvl.value for lvl in ActivityLevel],
    )
    ap.add_argument("--goal", default="maintenance", help="weightLoss | muscleGain | maintenance")
    ap.add_argument("--plan", action="store_true", help="include the full diet plan")
    return ap


def _run(args: argparse.Namespace) -> dict:
    profile = BiometricInput.from_raw(
        weight=args.weight,
        height=args.height,
        age=args.age,
        gender=args.gender,
        activity_level=args.activity_level,
        goal=args.goal,
    )
    rec = RecommendationCalculator().compute(profile)
    out = RecResponse.from_recommendation(rec).model_dump(by_alias=True)
    if not args.plan:
        out["dietPlan"] = out["dietPlan"]["name"]
    return out


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    json.dump(_run(args), sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
