"""Thread safe: segment 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from mathseg import parse

docs = [f"Doc {i}: $x_{i}$ and\n$$y_{i}$$" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(parse, docs))

print(f"Segmented {len(results)} documents in parallel")
print("First doc blocks:", len(results[0]))
print("Last doc blocks:", len(results[-1]))
