import logging
import sys

import htmlsemdiff


def main():
    if len(sys.argv) != 3:
        print("usage: render_pair.py OLD.html NEW.html", file=sys.stderr)
        return 2
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    with open(sys.argv[1], encoding="utf-8") as f:
        before = f.read()
    with open(sys.argv[2], encoding="utf-8") as f:
        after = f.read()

    out = htmlsemdiff.diff(before, after)
    print("deletions:", out.count("<del "), "insertions:", out.count("<ins "))
    print(out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
