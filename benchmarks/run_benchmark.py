import time

import numpy as np
from tqdm import tqdm

from mind_core.types import Note
from mind_related.engine import RelatednessEngine


def generate_corpus(n_notes: int, dim: int, seed: int = 7) -> list[Note]:
    rng = np.random.default_rng(seed)
    vectors = rng.normal(size=(n_notes, dim))
    # every 10th note has not been embedded yet
    return [
        Note(
            id=str(i),
            content=f"Synthetic note {i}",
            embedding=None if i % 10 == 0 else tuple(vectors[i].tolist()),
        )
        for i in range(n_notes)
    ]


def run_benchmarks():
    print("Initializing benchmark environment...")

    N_NOTES = 2000
    DIM = 384
    N_QUERIES = 100

    print(f"Generating {N_NOTES} synthetic notes ({DIM}-d)...")
    corpus = generate_corpus(N_NOTES, DIM)
    targets = [n for n in corpus if n.embedding is not None][:N_QUERIES]

    engine = RelatednessEngine()

    print("Benchmarking compute_related latency...")
    latencies = []
    hits = 0
    for target in tqdm(targets):
        start_q = time.perf_counter()
        related = engine.compute_related(target, corpus)
        latencies.append((time.perf_counter() - start_q) * 1000)  # ms
        hits += bool(related)

    avg_latency = np.mean(latencies)
    p95_latency = np.percentile(latencies, 95)
    std_dev = np.std(latencies)

    print("\nBenchmark Results:")
    print(f"Corpus size: {N_NOTES} notes, {DIM} dimensions")
    print(f"Average latency: {avg_latency:.2f} ms")
    print(f"P95 latency: {p95_latency:.2f} ms")
    print(f"Std dev: {std_dev:.2f} ms")
    print(f"Queries with related notes: {hits}/{len(targets)}")


if __name__ == "__main__":
    run_benchmarks()
