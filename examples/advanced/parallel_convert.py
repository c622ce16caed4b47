"""Thread safe — convert 1000 docs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from llano import convert

docs = ["# Doc " + str(i) + "\n\n*Content* for document " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(convert, docs))

print(f"Converted {len(results)} documents in parallel")
print("First:", repr(results[0]))
print("Last:", repr(results[-1]))
