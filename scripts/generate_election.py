"""Generate a random ranked-choice election payload.

Candidate and voter names come from faker, and every voter ranks the first
``--depth`` candidates of a random ordering, so all ballots share the same
length. A fixed seed makes the output reproducible.

Usage:
    python scripts/generate_election.py
    python scripts/generate_election.py --candidates 5 --voters 100 --depth 3 -o election.json
"""

import argparse
import json
import random
from pathlib import Path

from faker import Faker

SEED = 20260201


def generate_names(count: int, fake: Faker) -> list[str]:
    """Generate distinct fake names."""
    names: list[str] = []
    seen: set[str] = set()
    while len(names) < count:
        name = fake.name()
        if name not in seen:
            seen.add(name)
            names.append(name)
    return names


def generate_payload(num_candidates: int, num_voters: int, depth: int, seed: int) -> dict:
    fake = Faker(["en_US", "en_GB", "de_DE", "fr_FR"])
    Faker.seed(seed)
    rng = random.Random(seed)

    candidates = [
        {"id": i, "name": name}
        for i, name in enumerate(generate_names(num_candidates, fake), start=1)
    ]
    # Skew popularity so that counts are rarely decided in the first round
    weights = [rng.uniform(0.5, 2.0) for _ in candidates]

    ballots = []
    # Voters are identified by id, so their names may repeat
    for voter_id in range(1, num_voters + 1):
        voter_name = fake.name()
        remaining = list(candidates)
        remaining_weights = list(weights)
        votes = []
        for rank in range(1, depth + 1):
            choice = rng.choices(range(len(remaining)), weights=remaining_weights)[0]
            votes.append({"candidate": remaining.pop(choice)["id"], "rank": rank})
            remaining_weights.pop(choice)
        ballots.append({
            "voter": {"id": voter_id, "name": voter_name},
            "votes": votes,
        })

    return {"candidates": candidates, "ballots": ballots}


def main():
    parser = argparse.ArgumentParser(
        description="Generate a random ranked-choice election payload")
    parser.add_argument("--candidates", type=int, default=4,
                        help="Number of candidates (default: 4)")
    parser.add_argument("--voters", type=int, default=25,
                        help="Number of voters (default: 25)")
    parser.add_argument("--depth", type=int, default=None,
                        help="Candidates ranked per ballot (default: all)")
    parser.add_argument("--seed", type=int, default=SEED,
                        help=f"Random seed (default: {SEED})")
    parser.add_argument("-o", "--output", default=None,
                        help="Output path (default: print to stdout)")
    args = parser.parse_args()

    depth = args.depth if args.depth is not None else args.candidates
    if not 1 <= depth <= args.candidates:
        parser.error(f"--depth must be between 1 and {args.candidates}")

    payload = generate_payload(args.candidates, args.voters, depth, args.seed)
    text = json.dumps(payload, indent=2, ensure_ascii=False)

    if args.output is None:
        print(text)
        return

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text + "\n", encoding="utf-8")
    print(f"Written {len(payload['ballots'])} ballots for "
          f"{len(payload['candidates'])} candidates to {output_path}")


if __name__ == "__main__":
    main()
