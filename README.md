# eulerworks

Compact, dependency-free solutions to a set of classic number-theory
puzzles, plus a small tool that finds the rational roots of cubic
equations with decimal coefficients.

## Installation

```
pip install eulerworks
```

For running the test suite:

```
pip install "eulerworks[test]"
pytest
```

## Command line

Each puzzle has its own command that prints the answer and the time it
took:

| Command       | Puzzle                                                      | Options                       |
|---------------|-------------------------------------------------------------|-------------------------------|
| `euler-004`   | Largest palindrome made from two 3-digit factors            |                               |
| `euler-005`   | Smallest number divisible by every number from 1 to a limit | `--limit` (20)                |
| `euler-006`   | Square of the sum minus the sum of squares for 1..n         | `-n` (100)                    |
| `euler-007`   | The n-th prime                                              | `--count` (10001)             |
| `euler-009`   | Product of the Pythagorean triplet with a given sum         | `--total` (1000)              |
| `euler-047`   | First of n consecutive numbers with n distinct prime factors| `--count` (4)                 |
| `euler-048`   | Last digits of 1^1 + 2^2 + ... + limit^limit                | `--limit` (1000), `--digits` (10) |
| `euler-049`   | Concatenated 4-digit prime permutation progression          |                               |
| `euler-050`   | Prime below a limit that is the longest consecutive-prime sum | `--limit` (1000000)         |
| `euler-051`   | Family of primes from repeating-digit replacement           | `--size` (8)                  |
| `euler-052`   | Smallest x whose multiples 2x..5x use the same digits       |                               |
| `euler-053`   | Number of nCr values above a threshold                      | `--limit` (100), `--threshold` (1000000) |
| `euler-054`   | Poker deals won by the first player                         | `path` (poker.txt)            |
| `euler-055`   | Lychrel numbers below a limit                               | `--limit` (10000), `--iterations` (50) |
| `euler-056`   | Largest digit sum of a^b, with the power that gives it      | `--limit` (100)               |
| `euler-057`   | Square-root-of-two expansions with a longer numerator       | `--count` (1000)              |
| `euler-058`   | Spiral side length where diagonal primes fall below 10%     |                               |
| `euler-059`   | XOR key and sum of the decrypted text of a cipher file      | `path` (cipher.txt)           |
| `euler-060`   | Five primes that pairwise concatenate into primes, and their sum | `--max-primes` (1500)    |
| `cubic-roots` | Rational roots of A*x^3 + B*x^2 + C*x + D = 0               | `A B C D`                     |

`euler-054` reads a file with one deal of ten cards per line (the first
five belong to the first player), for example `5H 5C 6S 7S KD 2C 3S 8S 8D TD`.
`euler-059` reads a file of comma-separated character codes. Both print an
error and exit with status 1 if the file cannot be opened.

`cubic-roots` takes the four coefficients on the command line, or asks for
them one by one when none are given. Coefficients are rounded to three
decimals; the roots are printed as fractions, or `No answers` when none is
found.

## Library use

The building blocks are ordinary functions:

```python
from eulerworks.problem005 import smallest_multiple
from eulerworks.problem007 import nth_prime
from eulerworks.problem055 import is_lychrel
from eulerworks.cubic import rational_roots

smallest_multiple(10)           # 2520
nth_prime(6)                    # 13
is_lychrel(47, 50)              # False
rational_roots(1, -6, 11, -6)   # [Fraction(1, 1), Fraction(2, 1), Fraction(3, 1)]
```

Poker hands can be parsed and compared directly:

```python
from eulerworks.problem054 import Combination, parse_hand

first = parse_hand("5H 5C 6S 7S KD")
second = parse_hand("2C 3S 8S 8D TD")
first.combination() is Combination.ONE_PAIR   # True
first.beats(second)                           # False
```

The XOR cipher tools work on lists of codes:

```python
from eulerworks.problem059 import crack, decrypt, parse_cipher

codes = parse_cipher("36,22,80")
key, plain = crack(codes)       # first key from "aaa" that yields text
```

## What the package does not do

No puzzle data is shipped: the poker deals for `euler-054` and the cipher
codes for `euler-059` must be supplied as files. Poker ties are settled
only by the rank values the hand records (the main group, a second pair or
the highest card), not by a full comparison of every kicker.