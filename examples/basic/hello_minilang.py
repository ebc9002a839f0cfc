"""Scan and check a MiniLang snippet in a few lines — zero config, zero deps."""

from minilang import recognize, tokenize

source = "if (x) { print x * 2; } else { print 0 }"

for token in tokenize(source):
    print(token)

for diagnostic in recognize(source):
    print(diagnostic.location, diagnostic)
