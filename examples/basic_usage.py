"""Basic usage example for b91.

Run: python examples/basic_usage.py
"""

import b91


def main() -> None:
    data = b"Hello, World!"
    encoded = b91.encode(data)
    print("Encoded:", encoded)
    print("Decoded:", b91.decode(encoded))

    # Text in, text out, with a charset registered under a name
    codec = b91.Base91()
    codec.add_charset("reversed", str(b91.DEFAULT_ALPHABET)[::-1])
    text = codec.encode("basE91 is denser than Base64", version="reversed")
    print("Encoded (reversed charset):", text)
    print("Decoded:", codec.decode(text, version="reversed"))


if __name__ == "__main__":
    main()
