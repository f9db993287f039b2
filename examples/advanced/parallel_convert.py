"""Thread safe: convert 1000 docs in parallel with one shared Converter."""

from concurrent.futures import ThreadPoolExecutor

from tinta import Converter

converter = Converter()
docs = ["# Doc " + str(i) + "\n\nContent for *document* " + str(i) for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(converter.convert, docs))

print(f"Converted {len(results)} documents in parallel")
print("First doc lines:", len(results[0].lines))
print("Last doc heading:", results[-1].lines[0].text)
