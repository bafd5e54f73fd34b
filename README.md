# learnbench

A set of small teaching programs. Each one is a module you can call from
Python, and one of them also runs as an interactive console program.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- **`learnbench.huffman_file`**: Huffman compression with a readable text
  header that stores the original file suffix. `encode` and `decode` work on
  bytes. `compress_file` writes `<stem>.hz.bin` next to the input, and
  `uncompress_file` restores it as `<stem>un.<suffix>`. `HuffmanTree` builds
  the tree from byte counts, and `HuffmanTree.codes` maps each byte to its
  bit string. `get_postfix` and `get_file_stem` split a name at its first dot.
- **`learnbench.huffman_stream`**: a second Huffman format with a `HUFF`
  magic header and a binary frequency table. It provides `compress_bytes`,
  `decompress_bytes`, `compress_file`, `decompress_file`, `build_tree` and
  `code_table`. A malformed or truncated stream raises `InvalidFormatError`.
- **`learnbench.file_stream`**: `save_text_profile` writes a sample profile.
  `save_binary_person` and `read_binary_person` write and read a fixed-size
  record: a 64-byte name followed by a 32-bit age. `read_words` splits a text
  file into words.
- **`learnbench.signal`**: complex tone generation and float/int16 IQ
  conversion (`generate_signal_f`, `generate_signal_i`, `complex_f_to_i`,
  `complex_i_to_f`, `compose_signal`). It also has `angle_to_rad`,
  `rad_to_angle` and a `StreamArgs` record of channel settings.
- **`learnbench.work_state`**: the State pattern. A `Work` day passes through
  `ForenoonState`, `NoonState`, `AfternoonState`, `EveningState`,
  `RestState` and `SleepingState`. `Work.write_program` returns a line that
  describes the current hour.
- **`learnbench.text_query`**: `TextQuery` indexes lines by word,
  `TextQuery.query` returns a `QueryResult`, and `format_result` renders the
  result as text.
- **`learnbench.observers`**: the Observer pattern. A `Viewer` notifies
  `NBAObserver` and `StockObserver` instances and collects their reactions.
  The module also has a callback `Dispatcher`.
- **`learnbench.address_book`**: an `AddressBook` of `Contact` entries that
  holds 5 contacts by default. It validates sex (`Sex`), age and an
  11-character phone number. Adding to a full book raises `BookFullError`.
  `format_table` renders contacts, and `main` runs the interactive menu.
- **`learnbench.scoring`**: a speech-contest `ScoringSystem`. Each panel
  score drops the highest and lowest mark (`trimmed_average`). Rounds halve
  the field until one `Player` is left, and each contest is logged to a
  record file. `format_players` renders a score table.
- **`learnbench.heima_demos`**: operator overloading (`Pair`, `Counter`,
  `Ranked`), polymorphism (`Drink`, `Tea`, `Coffee`, `Part`, `Computer`),
  a generic `NamedAge`, `selection_sort_desc`, and a staff hierarchy
  (`Worker`, `Staff`, `Manager`, `Boss`).
- **`learnbench.generic_ops`**: small sequence and string helpers
  (`check_size`, `absolute_values`, `join_words`, `first_field`,
  `last_field`, `reverse_last_field`) and a `Book` record.

## Example

```python
from learnbench.huffman_stream import compress_bytes, decompress_bytes
from learnbench.text_query import TextQuery, format_result

blob = compress_bytes(b"abracadabra")
assert decompress_bytes(blob) == b"abracadabra"

tq = TextQuery(["the cat sat", "the dog ran"])
print(format_result(tq.query("the")))
```

## Command line

The address book runs as an interactive menu on standard input and output:

```
learnbench-address-book
```

## What it does not do

- The address book is the only command. The speech contest is available as
  the `ScoringSystem` class, but it has no interactive menu.
- `learnbench.signal` only generates and converts sample data. It does not
  talk to any radio device.
- Contacts in the address book exist only while the program runs. They are
  not saved anywhere.