# sysprac

A collection of small Unix-style command-line tools and concurrency
building blocks, written in plain Python with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Run-length compression

```
wzip FILE... > out.z         # run-length encode: 4-byte little-endian count + 1 byte per run
wunzip out.z                 # expand a wzip stream back to its bytes
```

`wzip` treats all the files it is given as one stream, so a run can carry
over from the end of one file into the next.

### A tiny shell

```
wish             # interactive, prompts with "wish> "
wish batch.txt   # run each line of batch.txt as a command
```

Each line names a single program, with no arguments, looked up in `/bin`
and then `/usr/bin`. When the program cannot be found or started, the shell
prints `An error has occurred` to standard error.

### Checksums

```
check-xor FILE          # XOR of the digit values in FILE (newlines skipped)
check-fletcher FILE     # Fletcher checksum (mod 255) of the digit values in FILE
crc16 FILE              # 16-bit CRC (polynomial 0x1021, initial 0xFFFF)
create-csum FILE SUMS   # write the running XOR after each 4096-byte block of FILE to SUMS
check-csum FILE SUMS    # compare FILE against SUMS, report corruption
```

The first three also print how many seconds the computation took.

### File-system tools

```
myfind [-d DEPTH] [-n PATTERN] [PATH]   # walk a tree, optionally keep names matching a basic regex
myls [PATH]                             # list a directory
myls -l PATH                            # long listing with mode, links, owner, group, size, time
mytail -N FILE                          # print the last N lines of FILE
mystat PATH                             # show file type, inode, mode, sizes and times
```

`myfind` skips names starting with a dot and never follows symbolic links
into directories.

### Networking

```
file-server [REQUESTS]          # serve the first 1024 bytes of requested files on TCP port 8080
file-server --async [REQUESTS]  # the same, reading files in the background
file-client SECONDS PATH        # wait, then ask the server for PATH
udp-server                      # print datagrams received on UDP port 10000 and acknowledge them
udp-client HOST                 # send two greetings to HOST and print what comes back
```

With a request count, `file-server` exits after serving that many requests
and reports the elapsed time.

### Demonstrations and benchmarks

```
vector-demo
btree-bench
simple-counter-bench
approximate-counter-bench
list-bench                     # single-lock list
list-bench --hand-over-hand    # list locked node by node
twolockqueue-demo
```

## Library use

```python
from sysprac.rle import compress, decompress
from sysprac.checksum import crc16, fletcher
from sysprac.btree import BTree
from sysprac.sync import Barrier, NoStarveMutex, ReaderWriterLock

packed = compress([b"aaabbb"])
assert decompress(packed) == b"aaabbb"

tree = BTree()
tree.put("www.example.com", "192.0.2.1")
print(tree.get("www.example.com"))

lock = NoStarveMutex()
with lock:
    ...

rw = ReaderWriterLock()
with rw.reading():
    ...
```

Other building blocks include `Vector` (a growable array that doubles when
full and halves when a quarter full), `SimpleCounter` and
`ApproximateCounter`, `ConcurrentList` and `HandOverHandList`,
`TwoLockQueue`, `FairReaderWriterLock`, `FileServer` with `request_file`,
and `UdpEndpoint`.

## What it does not do

- There is no command for printing files one after another, for searching
  lines for a term, or for printing a file's lines in reverse order.
- The primitives in `sysprac.sync` (`Barrier`, `NoStarveMutex`,
  `ReaderWriterLock`, `FairReaderWriterLock`) are library classes only; no
  command demonstrates them.