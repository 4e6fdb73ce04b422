# noemacore

`noemacore` is a small synthetic-mind core. A mind's identity is described by
an ontological profile written in YAML. Stimuli fed to the core update its
internal onto16 projection. The projection can then be read back in two forms:
fast (external, reactive) and slow (internal, reflective).

## Installation

```
pip install noemacore
```

To run the test suite:

```
pip install "noemacore[test]"
pytest
```

## Profiles

A profile needs an `id` and a `temperament`. The fields `birth_year` and
`elements` are optional. Other keys in the document are ignored.

```yaml
id: "test-001"
temperament: choleric
birth_year: 1985
elements: [Fire, Earth]
```

- Temperaments (`Temperament`) are `choleric`, `sanguine`, `phlegmatic` and
  `melancholic`.
- Elements (`Element`) are `wood`, `fire`, `earth`, `metal` and `water`.
- Both are matched without regard to case.
- `birth_year` must be an integer that fits in 32 signed bits.

```python
from noemacore.profile import Profile, ProfileError

profile = Profile.from_yaml(b"id: mind-1\ntemperament: sanguine\n")
print(profile.id, profile.temperament, profile.birth_year, profile.elements)
```

`Profile.from_yaml` and `parse_yaml_profile` accept either `bytes` or `str`.
The resulting `Profile` is immutable, and its `elements` is a tuple.

On failure they raise `ProfileError`, which has a `kind` (a `ProfileErrorKind`)
and a `message`:

- **parse** (`ProfileErrorKind.PARSE`): malformed YAML, a document that is not
  a mapping, a missing field, a field of the wrong type, or an unknown
  temperament or element.
- **validation** (`ProfileErrorKind.VALIDATION`): an empty `id`.

The error prints as `[ParseError] ...` or `[ValidationError] ...`.

## Processing stimuli

```python
from noemacore.api import Core144, CoreError, load_profile

profile = load_profile(b"id: mind-1\ntemperament: choleric\n")
core = Core144(profile)

projection = core.process("How should I respond to novelty?")
print(projection.noema_fast)
print(projection.noema_slow)

print(core.generate_projection())
```

### `Core144.process`

`Core144.process` takes a text stimulus and returns an `OntoProjection`, a
frozen dataclass with two string fields:

- `noema_fast`: the current projection state.
- `noema_slow`: the same state after a reflective (slow) stabilisation step.

`Core144.process` raises:

- `TypeError` if the stimulus is not a `str`.
- `CoreError` if the stimulus does not change the projection.

### `Core144.generate_projection`

`Core144.generate_projection` returns the current `OntoProjection` without
processing anything.

### Other members

- `Core144.profile` gives the profile the core was created with.
- Processing is deterministic: two cores given the same stimuli produce equal
  projections.

## Lower-level pieces

### `noemacore.projection`

`noemacore.projection.Projection` holds `hash_state`, `energy_level` and
`stability`.

`absorb(stimulus)` folds a stimulus (bytes or text) into the state using
`stimulus_hash`, a stable unsigned 64-bit hash. It returns whether the state
changed.

`stabilize(mode)` raises stability according to a `NoemaMode`:

- `NOEMA_FAST` adds 10.
- `NOEMA_SLOW` adds a hundredth of the energy level.

In both modes stability is capped at 255.

### `noemacore.engine`

`noemacore.engine.Engine` owns a `Projection`.

- `process(stimulus)` absorbs a stimulus and applies a fast stabilisation
  when the state changed. It returns that flag.
- `generate_projection()` returns the state rendered as UTF-8 bytes.
- `projection` gives a copy of the current state.

## Demo

The `noemacore-demo` command loads a profile, processes one stimulus and prints
the resulting projection as JSON.

```
noemacore-demo
noemacore-demo "Is this stimulus novel?" --profile mind.yaml
```

- Without arguments it uses a built-in profile and stimulus.
- `--profile` reads a YAML profile from a file.
- On a profile or core error the message goes to standard error and the exit
  status is 1.

## What it does not do

Stimuli are treated as raw bytes. There is no lexicon and no interpretation of
their meaning. A stimulus only shifts the projection's hash, energy and
stability.

Projections are rendered as plain text and are not a structured interchange
format. Profiles carry no behaviour beyond their fields. Keys such as `traits`
are not read.