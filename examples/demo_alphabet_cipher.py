"""
alphabet_cipher — Live Demo
===========================
Run:  python examples/demo_alphabet_cipher.py

Prints the cipher table, then encodes, decodes and deciphers the
canonical kata messages.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from alphabet_cipher import AlphabetCipher, TABLE, __version__, encode, decode, decipher, format_table

logger = logging.getLogger("alphabet_cipher.demo")

LINE = "═" * 70

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

logging.basicConfig(level=logging.INFO, format=' %(message)s')
logger.info(f"alphabet_cipher {__version__} | table: {len(TABLE)} rows")

# ─────────────────────────────────────────────────────────────────────────────
header("Cipher table")
print(format_table())

# ── ENCODE / DECODE ──────────────────────────────────────────────────────────
header("Encode / decode")
for keyword, message in [("vigilance", "meetmeontuesdayeveningatseven"),
                         ("scones",    "meetmebythetree")]:
    ct = encode(keyword, message)
    pt = decode(keyword, ct)
    ok(f"{keyword:<10} encoded", ct)
    ok(f"{keyword:<10} decoded", pt)
    assert pt == message

# ── DECIPHER ─────────────────────────────────────────────────────────────────
header("Decipher (keyword recovery)")
for ct, message in [("opkyfipmfmwcvqoklyhxywgeecpvhelzg", "thequickbrownfoxjumpsoveralazydog"),
                    ("hcqxqqtqljmlzhwiivgbsapaiwcenmyu",  "packmyboxwithfivedozenliquorjugs")]:
    ok("Recovered keyword", decipher(ct, message))

# ── OBJECT INTERFACE ─────────────────────────────────────────────────────────
header("AlphabetCipher")
c = AlphabetCipher.recover("egsgqwtahuiljgs", "Meet me by the tree!")
ok("Cipher", repr(c))
ok("Encrypted", c.encrypt("Meet me by the tree!"))

print(f"\n{LINE}")
print("  All demos complete.")
print(LINE + "\n")
