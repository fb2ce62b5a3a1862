#!/usr/bin/env python3
"""Inspect romaji predictions and DAGs for a kana string from the command line."""

import argparse
import json
from typing import List, Optional

from kanatype.nlp import get_predictor


def dag_to_json(kana: str, scheme: str = "google") -> str:
    """Return the priority-ordered DAG of *kana* as a JSON string."""
    predictor = get_predictor(scheme)
    nodes = [
        [edge.model_dump() for edge in edges]
        for edges in predictor.ordered_dag(kana)
    ]
    return json.dumps({"kana": kana, "nodes": nodes}, indent=2, ensure_ascii=False)

def prediction_to_json(kana: str, romaji: str, scheme: str = "google") -> str:
    """Return the prediction for *romaji* against *kana* as a camelCase JSON string."""
    result = get_predictor(scheme).predict(kana, romaji)
    return json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False)

def list_spellings(kana: str, limit: int, scheme: str = "google") -> List[str]:
    return list(get_predictor(scheme).iter_spellings(kana, limit))


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Predict how a romaji buffer maps onto a kana target."
    )
    parser.add_argument("kana", help="Target kana string (katakana is accepted)")
    parser.add_argument("romaji", nargs="?", default="",
                        help="Romaji typed so far (defaults to the empty buffer)")
    parser.add_argument("--scheme", default="google",
                        help="Romanization scheme (google)")
    parser.add_argument("--dag", action="store_true",
                        help="Print the priority-ordered DAG instead of a prediction")
    parser.add_argument("--spellings", type=int, metavar="N",
                        help="Print up to N accepted full spellings instead of a prediction")
    args = parser.parse_args(argv)

    if args.dag:
        print(dag_to_json(args.kana, args.scheme))
    elif args.spellings is not None:
        for spelling in list_spellings(args.kana, args.spellings, args.scheme):
            print(spelling)
    else:
        print(prediction_to_json(args.kana, args.romaji, args.scheme))


if __name__ == "__main__":
    main()
