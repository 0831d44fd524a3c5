"""
strmetric — Quick-start examples with dummy data.

Run:  python examples/quickstart.py
"""

from __future__ import annotations


def divider(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


# ──────────────────────────────────────────────────────────────
# 1. Pairwise similarity  (strmetric.distance)
# ──────────────────────────────────────────────────────────────

def example_metrics() -> None:
    divider("1 · Pairwise Similarity (strmetric.distance)")

    from strmetric.distance import LevenshteinMetric, NGramMetric

    metrics = [LevenshteinMetric(), NGramMetric(2), NGramMetric(3)]
    pairs = [
        ("kitten", "sitting"),
        ("color", "colour"),
        ("night", "nacht"),
        ("aaaa", "bbbb"),
        ("a", "ab"),
    ]

    for s1, s2 in pairs:
        scores = "  ".join(f"{m!r}={m.similarity(s1, s2):.3f}" for m in metrics)
        print(f'  "{s1}" vs "{s2}":  {scores}')


# ──────────────────────────────────────────────────────────────
# 2. Batch extraction  (strmetric.process)
# ──────────────────────────────────────────────────────────────

def example_process() -> None:
    divider("2 · Batch Extraction (strmetric.process)")

    from strmetric import process

    vocabulary = ["receive", "recipe", "deceive", "relieve", "retrieve", "receiver"]

    for query in ["recieve", "retreive"]:
        print(f'  Query: "{query}"')
        for scorer in ("levenshtein", "bigram", "trigram"):
            best = process.extract(query, vocabulary, scorer=scorer, limit=3)
            ranked = ", ".join(f"{c} ({s:.2f})" for c, s, _ in best)
            print(f"    {scorer:<12} {ranked}")
        print()


# ──────────────────────────────────────────────────────────────
# 3. Persisting configuration  (strmetric.serialization)
# ──────────────────────────────────────────────────────────────

def example_codec() -> None:
    divider("3 · Persisting Configuration (strmetric.serialization)")

    from strmetric import NGramMetric, NGramMetricCodec

    codec = NGramMetricCodec()
    data = codec.dumps(NGramMetric(3))
    print(f"  NGramMetric(3) -> {data!r}")
    print(f"  {data!r} -> {codec.loads(data)!r}")


if __name__ == "__main__":
    example_metrics()
    example_process()
    example_codec()
