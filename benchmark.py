#!/usr/bin/env python3
"""
Performance benchmark for striptags against other ways of extracting text from HTML.
Reads a corpus of .html or zstd-compressed .html.zst files (optionally decompressed
with a shared dictionary), or falls back to built-in sample documents.
"""

# ruff: noqa: PERF203, PLC0415, BLE001
from __future__ import annotations

import argparse
import pathlib
import re
import sys
import time

try:
    import zstandard as zstd
except ImportError:
    print("ERROR: zstandard is required. Install with: pip install zstandard")
    sys.exit(1)

SAMPLE_HTML = """
<!DOCTYPE html>
<html>
<head><title>Sample</title><meta charset="utf-8"></head>
<body>
    <!-- navigation -->
    <div class="container" data-config='{"a": "<b>"}'>
        <h1>Main Heading</h1>
        <p>A paragraph with <strong>bold</strong>, <em>italic</em> and a <a href="/x?a=1&b=2">link</a>.</p>
        <ul><li>Item 1</li><li>Item 2</li><li>Item 3</li></ul>
        <table>
            <tr><td>Cell 1</td><td>Cell 2</td></tr>
            <tr><td>Cell 3</td><td>Cell 4</td></tr>
        </table>
        <p>Math: 1 < 2 and 3 > 2</p>
    </div>
</body>
</html>
"""


def load_dict(dict_path: pathlib.Path | None) -> bytes | None:
    """Load the optional zstd dictionary used to compress the corpus."""
    if dict_path is None:
        return None
    if not dict_path.exists():
        print(f"ERROR: Dictionary not found at {dict_path}")
        sys.exit(1)
    return dict_path.read_bytes()


def load_html_files(
    corpus_dir: pathlib.Path,
    dict_bytes: bytes | None,
    limit: int | None = None,
) -> list[tuple[str, str]]:
    """
    Load *.html and *.html.zst files from a directory.
    Returns list of (filename, html_content) tuples.
    """
    if not corpus_dir.exists():
        print(f"ERROR: Corpus directory not found at {corpus_dir}")
        sys.exit(1)
    if dict_bytes is not None:
        dctx = zstd.ZstdDecompressor(dict_data=zstd.ZstdCompressionDict(dict_bytes))
    else:
        dctx = zstd.ZstdDecompressor()
    paths = sorted([*corpus_dir.glob("*.html"), *corpus_dir.glob("*.html.zst")])
    if limit:
        paths = paths[:limit]
    results = []
    for path in paths:
        try:
            data = path.read_bytes()
            if path.name.endswith(".zst"):
                data = dctx.decompress(data)
            results.append((path.name, data.decode("utf-8", errors="replace")))
        except Exception as e:
            print(f"Warning: Failed to load {path.name}: {e}")
            continue
    return results


def _time_extractor(extract, html_files: list, iterations: int) -> dict:
    """Time ``extract`` over every file, counting exceptions as errors."""
    all_times = []
    errors = 0
    error_files = []
    if html_files:
        try:
            extract(html_files[0][1])
        except Exception:
            pass
    for _ in range(iterations):
        for filename, html in html_files:
            try:
                start = time.perf_counter()
                extract(html)
                all_times.append(time.perf_counter() - start)
            except Exception as e:
                errors += 1
                error_files.append((filename, str(e)))
    return {
        "total_time": sum(all_times),
        "mean_time": sum(all_times) / len(all_times) if all_times else 0,
        "min_time": min(all_times) if all_times else 0,
        "max_time": max(all_times) if all_times else 0,
        "errors": errors,
        "success_count": len(all_times),
        "error_files": error_files,
    }


def benchmark_striptags(html_files: list, iterations: int = 1) -> dict:
    """Benchmark striptags."""
    try:
        from striptags import strip_tags
    except ImportError:
        return {"error": "striptags not importable"}
    return _time_extractor(strip_tags, html_files, iterations)


def benchmark_regex(html_files: list, iterations: int = 1) -> dict:
    """Benchmark the common one-line regex replacement."""
    tag_re = re.compile(r"<[^>]+>")
    return _time_extractor(lambda html: tag_re.sub("", html), html_files, iterations)


def benchmark_html_parser(html_files: list, iterations: int = 1) -> dict:
    """Benchmark stdlib html.parser collecting text data."""
    from html.parser import HTMLParser

    class TextCollector(HTMLParser):
        def __init__(self):
            super().__init__()
            self.data = []

        def handle_data(self, data):
            self.data.append(data)

    def extract(html):
        parser = TextCollector()
        parser.feed(html)
        parser.close()
        return "".join(parser.data)

    return _time_extractor(extract, html_files, iterations)


def benchmark_bs4(html_files: list, iterations: int = 1) -> dict:
    """Benchmark BeautifulSoup4 get_text()."""
    try:
        from bs4 import BeautifulSoup
    except ImportError:
        return {"error": "beautifulsoup4 not installed (pip install beautifulsoup4)"}
    return _time_extractor(lambda html: BeautifulSoup(html, "html.parser").get_text(), html_files, iterations)


def benchmark_lxml(html_files: list, iterations: int = 1) -> dict:
    """Benchmark lxml text_content()."""
    try:
        from lxml import html as lxml_html
    except ImportError:
        return {"error": "lxml not installed (pip install lxml)"}
    return _time_extractor(lambda html: lxml_html.fromstring(html).text_content(), html_files, iterations)


def benchmark_html5lib(html_files: list, iterations: int = 1) -> dict:
    """Benchmark html5lib, joining the text of the parsed tree."""
    try:
        import html5lib
    except ImportError:
        return {"error": "html5lib not installed (pip install html5lib)"}

    def extract(html):
        return "".join(html5lib.parse(html, namespaceHTMLElements=False).itertext())

    return _time_extractor(extract, html_files, iterations)


def benchmark_selectolax(html_files: list, iterations: int = 1) -> dict:
    """Benchmark selectolax text()."""
    try:
        from selectolax.parser import HTMLParser
    except ImportError:
        return {"error": "selectolax not installed (pip install selectolax)"}
    return _time_extractor(lambda html: HTMLParser(html).text(), html_files, iterations)


BENCHMARKS = {
    "striptags": benchmark_striptags,
    "regex": benchmark_regex,
    "html.parser": benchmark_html_parser,
    "bs4": benchmark_bs4,
    "lxml": benchmark_lxml,
    "html5lib": benchmark_html5lib,
    "selectolax": benchmark_selectolax,
}


def print_results(results: dict, file_count: int, iterations: int = 1):
    """Pretty print benchmark results."""
    print("\n" + "=" * 80)
    if iterations > 1:
        print(f"BENCHMARK RESULTS ({file_count} HTML files x {iterations} iterations)")
    else:
        print(f"BENCHMARK RESULTS ({file_count} HTML files)")
    print("=" * 80)

    print(f"\n{'Extractor':<15} {'Total (s)':<10} {'Mean (ms)':<10} {'Errors':<8}")
    print("-" * 80)

    striptags_time = results.get("striptags", {}).get("total_time", 0)

    for name in BENCHMARKS:
        if name not in results:
            continue
        result = results[name]
        if "error" in result:
            print(f"{name:<15} {result['error']}")
            continue

        total = result["total_time"]
        speedup = ""
        if name != "striptags" and striptags_time > 0 and total > 0:
            speedup = f" ({total / striptags_time:.2f}x)"
        print(f"{name:<15} {total:<10.3f} {result['mean_time'] * 1000:<10.3f} {result['errors']:<8}{speedup}")

    print("\n" + "=" * 80)

    for name in BENCHMARKS:
        error_files = results.get(name, {}).get("error_files", [])
        if error_files:
            print(f"\nErrors for {name}:")
            for filename, error_msg in error_files:
                print(f"  {filename}: {error_msg}")
            print()


def main():
    parser = argparse.ArgumentParser(
        description="Benchmark HTML text extraction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--corpus", type=pathlib.Path, help="Directory with *.html / *.html.zst files")
    parser.add_argument("--dict", type=pathlib.Path, help="zstd dictionary used to compress the corpus")
    parser.add_argument(
        "--limit", type=int, default=100, help="Limit number of files to test (default: 100, use 0 for all)",
    )
    parser.add_argument(
        "--iterations", type=int, default=5, help="Number of iterations to run for averaging (default: 5)",
    )
    parser.add_argument(
        "--extractors",
        nargs="+",
        choices=list(BENCHMARKS),
        default=list(BENCHMARKS),
        help="Extractors to benchmark (default: all)",
    )

    args = parser.parse_args()

    if args.corpus:
        print(f"Loading HTML files from {args.corpus}...")
        limit = args.limit if args.limit > 0 else None
        html_files = load_html_files(args.corpus, load_dict(args.dict), limit)
    else:
        print("No --corpus given, using built-in sample documents")
        html_files = [(f"sample-{i}.html", SAMPLE_HTML * (i + 1)) for i in range(20)]
    if not html_files:
        print("ERROR: No HTML files loaded")
        sys.exit(1)
    print(f"Loaded {len(html_files)} HTML files")

    total_bytes = sum(len(html) for _, html in html_files)
    print(f"Total HTML size: {total_bytes / 1024 / 1024:.2f} MB")

    results = {}
    for name in args.extractors:
        print(f"\nBenchmarking {name}...", end="", flush=True)
        res = BENCHMARKS[name](html_files, args.iterations)
        results[name] = res
        if "error" in res:
            print(f" SKIPPED ({res['error']})")
        else:
            print(f" DONE ({res['total_time']:.3f}s)")

    print_results(results, len(html_files), args.iterations)


if __name__ == "__main__":
    main()
