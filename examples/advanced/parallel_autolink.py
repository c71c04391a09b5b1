"""Free-threading safe — autolink 10000 comments in parallel."""

from concurrent.futures import ThreadPoolExecutor

from enlace import Autolinker
from enlace.profiling import profiled_scan

comments = [f"comment {i}: see http://example.com/{i} or mail user{i}@example.com" for i in range(10000)]
linker = Autolinker(link_attr='rel="nofollow"')

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(linker, comments))

print(f"Linked {sum(r.link_count for r in results)} links in {len(results)} comments")

# Profiling is per context; measure a sequential batch
with profiled_scan() as metrics:
    linker.link_many(comments[:1000])
print(metrics.summary())
