"""Free-threading safe: scan 1000 programs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from toylang import scan

programs = ["x" + str(i) + " = " + str(i) + " * (y + 1);" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(scan, programs))

print(f"Scanned {len(results)} programs in parallel")
print("First program tokens:", len(results[0]))
print("Last program tokens:", len(results[-1]))
