#!/usr/bin/env python3
"""Profile striptags to find performance bottlenecks."""

import cProfile
import io
import pstats

from striptags import strip_tags

# Sample HTML
html = """
<!DOCTYPE html>
<html>
<head><title>Test</title></head>
<body>
    <!-- layout -->
    <div class="container" data-x='<not a tag>'>
        <p>Paragraph 1</p>
        <p>Paragraph 2 with 1 < 2</p>
        <table>
            <tr><td>Cell 1</td><td>Cell 2</td></tr>
            <tr><td>Cell 3</td><td>Cell 4</td></tr>
        </table>
    </div>
</body>
</html>
""" * 100  # Repeat for more meaningful results

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    strip_tags(html)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(20)
print(s.getvalue())
