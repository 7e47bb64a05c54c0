# toposwarm

Tools for a small simulated robot swarm. Each agent wanders with random
velocity commands. Bumper contacts between agents and obstacles are recorded
and saved to a text file for later analysis.

## Contact recording

`toposwarm.contact` takes bumper-sensor messages and turns them into
`ContactEvent` records.

- `ContactsState` is one sensor message. It holds a list of `ContactState`
  entries. Each entry has an `info` string and a list of contact positions
  (`Vector3`).
- Only the first state of a non-empty message is recorded, and only its
  first contact position is kept.
- The contact time is read from the seven characters after `time:` in the
  info string. If those characters do not start with a number, the time is
  0.0.
- The two geometries are the names found after `my geom:` and
  `other geom:`, up to the next `::`.
- A missing `time:`, `my geom:` or `other geom:` key raises `ValueError`.
  A state with no contact positions raises `ValueError` as well.

`ContactRecorder(node_name, directory, limit)` keeps events in its `events`
list until `limit` is reached. The default limit is 500. After that, the
next message passed to `receive` writes every event to a file, and this
happens only once. The `saved` flag records that the write has happened.

- The file is `directory / file_name_for_node(node_name)`, which is the node
  name with its slashes removed and `.txt` appended. It is also available as
  the `path` property.
- If the file cannot be written, `receive` logs an error and does not retry.
- Calling `write()` directly writes the file and returns its path. It
  raises `OSError` on failure.

Progress messages are logged through the standard `logging` module, under
the logger `toposwarm.contact`.

```python
from toposwarm.contact import ContactRecorder

recorder = ContactRecorder("/subscribe_to_contact_message", ".", 500)
for msg in incoming_messages:   # ContactsState objects from your simulator
    recorder.receive(msg)
```

Each line of the saved file is produced by `ContactEvent.format_line()`.
Numbers are printed in general (`%g`) format, with a tab after each comma:

```
t: 12.345,	x: 0.5,	y: -1.25,	m: agent1,	o: wall
```

The helpers `parse_for_link`, `parse_contact_time`, `event_from_state` and
`file_name_for_node` are public as well, for parsing messages yourself.

## Random velocities

`toposwarm.velocity` makes the commands that move each agent. Every `Twist`
has a `linear` and an `angular` `Vector3`. Only the linear x and y
velocities are set, and each is drawn uniformly from [-1, 1].

```python
import itertools
from toposwarm.velocity import velocity_stream

for twist in itertools.islice(velocity_stream("/agent1", 2.0, None), 5):
    print(twist)
```

- `velocity_stream(node_name, rate, seed)` yields twists forever, `rate`
  times per second. It sleeps between yields to keep that pace. A rate that
  is not positive raises `ValueError`.
- `seed_for_node(node_name, now)` combines a timestamp with a CRC-32 of the
  node name into a 32-bit seed, so agents started together still move
  differently. It is used when `seed` is `None`.
- Pass an explicit seed to get the same sequence every time.
- `random_twist(rng)` draws one command from a `random.Random` you supply.

## What it does not do

The package does not talk to a simulator or a robot middleware. It has no
command-line entry point and no running node. It neither subscribes to
sensor topics nor publishes velocity commands. You feed `ContactsState`
objects to a `ContactRecorder` and send the `Twist` values from
`velocity_stream` on your own.

## Requirements

Python 3.10 or newer. The package uses only the standard library.