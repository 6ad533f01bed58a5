#!/usr/bin/env python3
"""
Benchmark comparison between pure Python and mypyc-compiled versions of striptags.

Build the compiled version with:
    STRIPTAGS_USE_MYPYC=1 pip install -e .[mypyc] --no-build-isolation
"""

import argparse
import sys
import time

SIMPLE_HTML = "<html><body><p>Hello World</p></body></html>"

COMPLEX_HTML = """
<!DOCTYPE html>
<html>
<head>
    <title>Test Page</title>
    <meta charset="utf-8">
</head>
<body>
    <div class="container" title='a > b'>
        <h1>Main Heading</h1>
        <p>This is a test paragraph with <strong>bold</strong> and <em>italic</em> text.</p>
        <ul>
            <li>Item 1</li>
            <li>Item 2</li>
        </ul>
    </div>
</body>
</html>
""" * 10

COMMENT_HEAVY_HTML = "<!-- a -- b -> c --><p>text</p><!-- <b>x</b> -->" * 100

PLAIN_TEXT = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. " * 200


def is_compiled():
    """Check whether the stripper module was compiled with mypyc."""
    from striptags import stripper

    return not stripper.__file__.endswith(".py")


def benchmark_strip(html, iterations=1000):
    """Time strip_tags on one input."""
    from striptags import strip_tags

    start = time.perf_counter()
    for _ in range(iterations):
        strip_tags(html)
    return time.perf_counter() - start


def run_benchmarks():
    """Run all benchmarks."""
    from striptags import stripper

    print("=" * 70)
    print("striptags mypyc Benchmark Comparison")
    print("=" * 70)

    if is_compiled():
        print("\n✓ striptags.stripper is compiled")
    else:
        print("\n✗ striptags.stripper is pure Python")
    print(f"  location: {stripper.__file__}")

    cases = [
        ("Simple HTML", SIMPLE_HTML, 10000),
        ("Complex HTML", COMPLEX_HTML, 1000),
        ("Comment-heavy HTML", COMMENT_HEAVY_HTML, 1000),
        ("Plain text", PLAIN_TEXT, 1000),
    ]
    timings = {}
    for i, (label, html, iterations) in enumerate(cases, 1):
        print("\n" + "-" * 70)
        print(f"Benchmark {i}: {label}")
        print("-" * 70)
        elapsed = benchmark_strip(html, iterations=iterations)
        print(f"Time: {elapsed:.4f}s for {iterations:,} iterations")
        print(f"Rate: {iterations / elapsed:.2f} strips/second")
        timings[label] = elapsed

    print("\n" + "=" * 70)
    return timings


def main():
    parser = argparse.ArgumentParser(description="Compare performance of pure Python vs mypyc-compiled striptags")
    parser.add_argument(
        "--mode",
        choices=["pure", "compiled", "any"],
        default="any",
        help="Require a pure or compiled build before running (default: any)",
    )
    args = parser.parse_args()

    compiled = is_compiled()
    if args.mode == "pure" and compiled:
        print("Found a compiled striptags.stripper; reinstall without STRIPTAGS_USE_MYPYC to benchmark pure Python.")
        sys.exit(1)
    if args.mode == "compiled" and not compiled:
        print("striptags.stripper is not compiled. Build it with:")
        print("  STRIPTAGS_USE_MYPYC=1 pip install -e .[mypyc] --no-build-isolation")
        sys.exit(1)

    run_benchmarks()


if __name__ == "__main__":
    main()
