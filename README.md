# fundalgo

A collection of small, self-contained algorithms and data structures. It
has no dependencies beyond the standard library.

## Modules

- `fundalgo.errors`: the `ErrorCode` enumeration, `message_for(code)` and the
  `AlgoError` exception. `AlgoError` carries a `code` and a `message`.
- `fundalgo.arrays`: arithmetic on digit strings in any base from 2 to 36
  (`add_decimal`, `add_base`, `multiply_digit`, `multiply_base`,
  `value_to_str`, `value_to_base`, `str_to_int`, `strip_leading_zeros`,
  `slice_digits`, `compare`). It also has character classification helpers
  (`is_num`, `is_letter`, `is_alnum`, `is_special_character`, `to_lower`,
  `base_char_to_dec`) and token readers for text streams (`seek_char`,
  `read_value`, `read_value_to_sc`). An invalid base or digit raises
  `AlgoError`.
- `fundalgo.overio`: the scanf-style readers `overfscanf(stream, fmt, *args)`
  and `oversscanf(text, fmt, *args)`. They return the values they read as a
  list. Besides the usual `%d %i %u %o %x %f %e %g %s %c` conversions, they
  understand these:
  - `%Ro`: a Roman numeral.
  - `%Zr`: a Zeckendorf code, written as blank-separated 0/1 digits and
    closed by `1 1`.
  - `%Cv` or `%CV`: a number in a base. The base is taken from the next extra
    argument.
  - `%S`, `%Se` and `%Sn`: a whitespace-delimited token.

  The module also has the standalone decoders `roman_value`, `unroman`,
  `unzeckendorf`, `unzeckendorf_str` and `to_decimal`, and
  `skip_to_end_line`. Input that ends early raises `EOFError`. A mismatched
  literal, a bad number or an unknown conversion raises `AlgoError`.
- `fundalgo.binary_int`: `BinaryInt` is an immutable signed 32-bit integer.
  Its addition goes through `adder`, which uses only XOR, AND and shifts.
  `split_bits()` returns the high and low halves of the bits.
- `fundalgo.rc4`: `Encoder` is an RC4 stream cipher.
  - `transform(data)` works on bytes.
  - `encode(in_path, out_path)` works on files.
  - `change_key(key)` replaces the key.

  An empty key raises `AlgoError`, and so do identical input and output
  paths or a file that cannot be opened.
- `fundalgo.logical`: `LogicalValuesArray` packs 32 logical values into one
  word. It has these operations:
  - `inversion`, `conjunction`, `disjunction`
  - `implication`, `coimplication`
  - `exclusive_disjunction`, `equivalence`
  - `peirce_arrow`, `sheffer_stroke`
  - `equals`, `get_bit`

  `str()` gives the 32-bit binary form.
- `fundalgo.complexnum`: `ComplexNumber` supports `+`, `-`, `*` and `/`, and
  has `abs()`, `sqabs()` and `arg()`. Dividing by zero raises
  `ZeroDivisionError`.
- `fundalgo.vector`: `Vector` is a growable array of floats that tracks its
  capacity separately from its size. It has these methods:
  - `at`, `front`, `back`
  - `capacity`, `reserve`, `shrink_to_fit`
  - `insert`, `erase`, `push_back`, `pop_back`
  - `resize`, `clear`
  - `from_iterable`

  It also supports lexicographic comparison. An index outside the size
  raises `IndexError`.
- `fundalgo.warehouse`: `Product` and its kinds `PerishableProduct`,
  `ElectronicProduct` and `BuildingMaterial`, kept in a `Warehouse`. Each
  product has its own `storage_fee`, `describe` and `category`. `Warehouse`
  supports these operations:
  - `+=` to add a product and `-=` with an ID to remove products.
  - `warehouse[id]` for lookup. A missing ID raises `KeyError`.
  - `find_product_by_id`, `find_products_by_category`
  - `calculate_storage_price`, `expiring_products`, `display_inventory`

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Digit-string arithmetic:

```python
from fundalgo.arrays import add_base, value_to_base

value_to_base(255, 16)       # "FF"
add_base("FF", "1", 16)      # "100"
```

Parsing Roman numerals:

```python
from fundalgo.overio import unroman

unroman("MCMXCIV")           # 1994
```

Encrypting with RC4. Applying the same key twice gives back the input:

```python
from fundalgo.rc4 import Encoder

encoder = Encoder(b"\x01\x02\x03")
ciphertext = encoder.transform(b"hello")
assert encoder.transform(ciphertext) == b"hello"
```

Complex numbers:

```python
from fundalgo.complexnum import ComplexNumber

z = ComplexNumber(3.0, 4.0)
abs(z)                       # 5.0
```

Keeping stock:

```python
from fundalgo.warehouse import Warehouse, BuildingMaterial

warehouse = Warehouse()
warehouse += BuildingMaterial("Paint", 301, 5.0, 50.0, 0, 2)
warehouse[301].category()    # "BuildingMaterial"
```

## Demonstrations

Each component has a small demonstration program that prints its results:

```
fundalgo-binary-int
fundalgo-rc4
fundalgo-logical
fundalgo-complex
fundalgo-vector
fundalgo-warehouse
```

`fundalgo-rc4` works on files in the current directory, or in a directory
given as its first argument. It runs these steps and reports on each one:

1. It encrypts `test_in.txt` and decrypts the result again.
2. It repeats step 1 with a second key.
3. It checks for the expected failure when the input and output paths are
   the same.
4. It checks for the expected failure when the input file is missing.

## Limitations

The package is a library. The demonstration commands take no input and
write fixed output. Warehouse contents live only in memory and are not
stored anywhere.