#!/usr/bin/env python3
"""
Random fuzzer for tag strippers.
Generates malformed markup and checks that stripping never crashes or hangs.
For striptags it also checks the output invariants that hold for any input.
"""

import argparse
import random
import string
import sys
import time
import traceback

TAGS = [
    "div", "span", "p", "a", "img", "table", "tr", "td", "ul", "li", "br",
    "script", "style", "title", "textarea", "svg", "math", "template", "pre",
    "!DOCTYPE", "?xml", "![CDATA[", "!", "?",
]

ATTRIBUTES = ["id", "class", "style", "href", "src", "alt", "title", "onclick", "data-x", "hidden"]

SPECIAL_CHARS = [
    "\x00", "\x0b", "\x0c", "\x7f",  # Control chars
    "\ufffd",  # Replacement character
    "\u00a0",  # Non-breaking space
    "\u2028", "\u2029",  # Line/paragraph separators
    "\u200b",  # Zero-width space
    "\ufeff",  # BOM
    "\U0001f600",  # Astral plane
]

# Characters the scanner treats specially
STRUCTURAL = ["<", ">", '"', "'", "-", "!", " ", "\t", "\n", "\r"]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def random_whitespace():
    """Generate random whitespace (including ones the scanner does not know)."""
    ws = [" ", "\t", "\n", "\r", "\f", "\v", "\u00a0", ""]
    return "".join(random.choices(ws, k=random.randint(0, 3)))


def fuzz_text():
    """Generate text content, sometimes with stray structural characters."""
    strategies = [
        lambda: random_string(1, 30),
        lambda: random_string() + random.choice([">", "->", "-->", '"', "'"]) + random_string(),
        lambda: random_string() + " < " + random_string(),
        lambda: random_string() + "<" + random_whitespace() + random_string(),
        lambda: random.choice(SPECIAL_CHARS) * random.randint(1, 5),
        lambda: "&lt;" + random_string() + "&gt;",
    ]
    return random.choice(strategies)()


def fuzz_attribute():
    """Generate attributes with broken or unusual quoting."""
    name = random.choice(ATTRIBUTES + [random_string(1, 8), "", "=", "<", ">"])
    value_strategies = [
        lambda: random_string(0, 30),
        lambda: "<script>alert(1)</script>",
        lambda: "a > b",
        lambda: "<<" + random_string() + ">",
        lambda: "it's",
        lambda: 'say "hi"',
        lambda: "<!--" + random_string() + "-->",
    ]
    quote_styles = [
        ('="', '"'),
        ("='", "'"),
        ("=", ""),  # Unquoted
        ("", ""),  # No value
        ('="', ""),  # Unclosed quote
        ("='", ""),  # Unclosed single quote
        ("='", '"'),  # Mismatched quotes
    ]
    value = random.choice(value_strategies)()
    quote_start, quote_end = random.choice(quote_styles)
    return f"{name}{quote_start}{value}{quote_end}"


def fuzz_open_tag():
    """Generate malformed opening tags."""
    tag = random.choice(TAGS)
    attrs = " ".join(fuzz_attribute() for _ in range(random.randint(0, 4)))
    closings = [">", "/>", " >", "", ">>", ">>>", "<>", "<>>"]
    openings = ["<", "< ", "<\t", "<<", "<!", "</"]
    opening = random.choice(openings) if random.random() < 0.2 else "<"
    return f"{opening}{tag}{random_whitespace()}{attrs}{random_whitespace()}{random.choice(closings)}"


def fuzz_close_tag():
    """Generate malformed closing tags."""
    tag = random.choice(TAGS)
    variants = [
        f"</{tag}>",
        f"</ {tag}>",
        f"</{tag}",  # Unclosed
        f"<//{tag}>",
        f"</{tag} {fuzz_attribute()}>",
    ]
    return random.choice(variants)


def fuzz_comment():
    """Generate malformed comments."""
    content = random_string(0, 30)
    variants = [
        f"<!--{content}-->",
        f"<!-{content}-->",
        f"<!--{content}->",
        f"<!--{content}",  # Unclosed
        f"<!---{content}--->",
        f"<!--{content}--!>",
        "<!---->",
        "<!-->",
        "<!--->",
        f"<!--{content}-- >{content}-->",
        f"<!--{content}->-{content}-->",
        f"<!-- <b>{content}</b> -->",
        f"<!-- '{content} -->",
    ]
    return random.choice(variants)


def fuzz_nested_brackets():
    """Generate bogus nested angle brackets inside tags."""
    depth = random.randint(1, 5)
    return "<" + random.choice(TAGS) + "<" * depth + random_string() + ">" * random.randint(0, depth + 2)


def fuzz_structural_noise():
    """Generate dense runs of the characters the scanner reacts to."""
    return "".join(random.choices(STRUCTURAL + ["a", "b"], k=random.randint(1, 40)))


def generate_fuzzed_html():
    """Generate a random fuzzed document."""
    parts = []
    for _ in range(random.randint(1, 30)):
        element_type = random.choices(
            [
                fuzz_text,
                fuzz_open_tag,
                fuzz_close_tag,
                fuzz_comment,
                fuzz_nested_brackets,
                fuzz_structural_noise,
            ],
            weights=[25, 25, 15, 10, 5, 5],
        )[0]
        parts.append(element_type())
    return "".join(parts)


def check_invariants(html, output):
    """Return a description of the first broken invariant, or None."""
    from striptags import strip_tags

    if strip_tags(output) != output:
        return "stripping the output again changed it"
    for i, c in enumerate(output):
        if c == "<" and output[i + 1 : i + 2] != " ":
            return f"'<' at output position {i} is not followed by a space"
    if len(output) > len(html):
        return "output is longer than input"
    if "<" not in html and output != html:
        return "text without '<' was modified"
    return None


def _stripper_fn(name):
    if name == "striptags":
        from striptags import strip_tags

        return strip_tags
    if name == "bs4":
        from bs4 import BeautifulSoup

        return lambda html: BeautifulSoup(html, "html.parser").get_text()
    if name == "lxml":
        from lxml import html as lxml_html

        return lambda html: lxml_html.fromstring(html).text_content() if html.strip() else ""
    if name == "html.parser":
        from html.parser import HTMLParser

        class TextCollector(HTMLParser):
            def __init__(self):
                super().__init__()
                self.data = []

            def handle_data(self, data):
                self.data.append(data)

        def strip(html):
            parser = TextCollector()
            parser.feed(html)
            parser.close()
            return "".join(parser.data)

        return strip
    print(f"Unknown stripper: {name}")
    sys.exit(1)


def run_fuzzer(stripper_name, num_tests, seed=None, verbose=False, save_failures=False):
    """Run the fuzzer against a stripper."""
    if seed is not None:
        random.seed(seed)

    strip_fn = _stripper_fn(stripper_name)
    check = stripper_name == "striptags"

    crashes = []
    hangs = []
    violations = []
    successes = 0

    print(f"Fuzzing {stripper_name} with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        html = generate_fuzzed_html()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            output = strip_fn(html)
            elapsed = time.perf_counter() - start
        except Exception as e:
            crashes.append({
                "test_num": i,
                "html": html,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue

        if elapsed > 5.0:
            hangs.append({"test_num": i, "html": html, "time": elapsed})
            if verbose:
                print(f"  HANG: Test {i} took {elapsed:.2f}s")
            continue

        problem = check_invariants(html, output) if check else None
        if problem:
            violations.append({"test_num": i, "html": html, "output": output, "problem": problem})
            if verbose:
                print(f"  VIOLATION: Test {i}: {problem}")
            continue
        successes += 1

    elapsed_total = time.time() - start_time

    print(f"\n{'='*60}")
    print(f"FUZZING RESULTS: {stripper_name}")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    if check:
        print(f"Violations:     {len(violations)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests/elapsed_total:.1f}")

    if crashes:
        print(f"\n{'='*60}")
        print("CRASH DETAILS:")
        print(f"{'='*60}")
        for crash in crashes[:10]:
            print(f"\nTest #{crash['test_num']}:")
            print(f"  HTML: {crash['html'][:200]!r}...")
            print(f"  Error: {crash['error']}")
        if len(crashes) > 10:
            print(f"\n... and {len(crashes) - 10} more crashes")

    if violations:
        print(f"\n{'='*60}")
        print("INVARIANT VIOLATIONS:")
        print(f"{'='*60}")
        for violation in violations[:10]:
            print(f"\nTest #{violation['test_num']}: {violation['problem']}")
            print(f"  HTML:   {violation['html'][:200]!r}")
            print(f"  Output: {violation['output'][:200]!r}")

    if hangs:
        print(f"\n{'='*60}")
        print("HANG DETAILS:")
        print(f"{'='*60}")
        for hang in hangs[:5]:
            print(f"\nTest #{hang['test_num']} ({hang['time']:.2f}s):")
            print(f"  HTML: {hang['html'][:200]!r}...")

    if save_failures and (crashes or hangs or violations):
        filename = f"fuzz_failures_{stripper_name}_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write(f"Fuzzing results for {stripper_name}\n")
            f.write(f"Seed: {seed}\n\n")
            for crash in crashes:
                f.write(f"=== CRASH #{crash['test_num']} ===\n")
                f.write(f"HTML:\n{crash['html']!r}\n")
                f.write(f"Error: {crash['error']}\n")
                f.write(f"Traceback:\n{crash['traceback']}\n\n")
            for violation in violations:
                f.write(f"=== VIOLATION #{violation['test_num']}: {violation['problem']} ===\n")
                f.write(f"HTML:\n{violation['html']!r}\n")
                f.write(f"Output:\n{violation['output']!r}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"HTML:\n{hang['html']!r}\n\n")
        print(f"\nFailures saved to {filename}")

    return not crashes and not hangs and not violations


def main():
    parser = argparse.ArgumentParser(description="Fuzz tag strippers with malformed markup")
    parser.add_argument(
        "--stripper", "-p",
        choices=["striptags", "bs4", "lxml", "html.parser"],
        default="striptags",
        help="Stripper to fuzz (default: striptags)",
    )
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed documents (no stripping)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed is not None:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(generate_fuzzed_html())
            print()
        return

    success = run_fuzzer(
        args.stripper,
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
