"""DST Word Merger: stitch single-letter embroidery designs into one word.

WHY: Lettering libraries ship one Tajima DST file per letter (and per word
length, so the letters shrink to fit the hoop). Embroidery machines take one
file per job, so a word has to be merged into a single design before it can
be stitched.

HOW: Three-stage pipeline: fetch (letter sources), merge (core), deliver
(CLI file output or HTTP download). The core is a pure, stateless transform
from ordered letter buffers to one merged buffer.

RULES:
- The core never reinterprets stitch coordinates or header fields
- Letter order is the word order, never fetch-completion order
- Any failure aborts the whole word; no partial design is ever produced
"""

__version__ = "0.1.0"
