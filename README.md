# ttydsp

Building blocks for a radioteletype (RTTY) terminal unit working at an
8 kHz sample rate: biquad filtering, automatic gain control, a mark/space
decision threshold, a Baudot receiver for a current loop, AFSK tone
selection and PWM audio scaling. It also holds plain-Python models of the
microcontroller's ADC, clock controller, interrupt table, CPU exception
handling and start-up sequence, so the pieces can be exercised without
hardware.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Signal processing

- `ttydsp.biquad`: `Biquad(filter_type, db_gain, freq, srate, q)` builds a
  second-order section for any `FilterType` (`LPF`, `HPF`, `BPF`, `NOTCH`,
  `PEQ`, `LSH`, `HSH`); `db_gain` matters only for `PEQ`, `LSH` and `HSH`.
  `process(sample)` filters one sample, `reset()` clears the delay line.
  An unknown filter type raises `ValueError`.
- `ttydsp.agc`: `Agc(target_level=0.5, max_gain=200.0, cutoff=1.0,
  sample_rate=8000.0)`. `process(sample)` low-pass filters the rectified
  input, sets `gain` to `target_level / level` (capped at `max_gain`) and
  returns the scaled sample.
- `ttydsp.threshold`: `DynamicThreshold(cutoff=50.0, sample_rate=8000.0)`.
  `update(mark_level, space_level)` records the peak level of each mark and
  space period and returns half the difference of the last mark and space
  peaks, passed through a low-pass filter.
- `ttydsp.baudot`: `BaudotReceiver(on_char=None)`. Call `feed(loop_open)`
  once per 8 kHz sample, `True` while the loop is open (space). It returns a
  decoded character at the end of each frame, otherwise `None`; it handles
  the letters/figures shifts, drops back to letters on a space, and counts
  frames in `char_count` and bad stop bits in `bad_stop_bit_count`. If
  `on_char` is given it is called once per completed frame, with `None` for
  shift and blank codes. `decode_samples(samples)` decodes a whole sequence
  into a string. The code tables are `LETTERS` and `FIGURES`.
- `ttydsp.afsk`: `AfskGenerator(set_frequency, mark_freq, space_freq)` calls
  `set_frequency(mark_freq)` at once; `update(loop_open)` selects the space
  tone while the loop is open and the mark tone otherwise, passes it to
  `set_frequency` and returns it.
- `ttydsp.pwm`: `duty_cycle_count(sample, period)` maps a sample from -1.0
  to +1.0 onto a compare count from 0 to `period`.

## Peripheral models

- `ttydsp.adchs`: `Adchs` keeps the ADC registers as integers.
  `initialize()` writes the start-up configuration and enables module 4
  (raising `RuntimeError` when `reference_fault` is set); there are methods
  to enable modules (`ModuleMask`), per-channel interrupts (`Channel`), start
  conversions, and `complete_conversion(channel, value)` to stand in for the
  converter. `result_get` returns 16 bits and clears the ready flag.
- `ttydsp.clock`: `ClockController` with the SYSKEY unlock sequence
  (`write_syskey`) and the PMD registers (`set_pmd`, which raises
  `SystemLockedError` while locked). `initialize()` unlocks, writes
  `PMD_DEFAULTS` and locks again.
- `ttydsp.exceptions`: `decode_cause(cause)` extracts an `ExceptionCode`
  from a Cause register value; `handle_exception(kind, cause, epc)` raises
  `CpuException` carrying the `ExceptionKind`, code and address.
- `ttydsp.interrupts`: `InterruptTable` with `register(vector, handler)` and
  `dispatch(vector)` for each `Vector`; dispatching an unregistered vector
  raises `LookupError`.
- `ttydsp.initialization`: `System(hooks)` owns a clock, ADC and interrupt
  table. `initialize()` runs the steps in `INIT_ORDER`, calling any hook
  given for a step, then enables interrupts and returns the step names.

## Example

```python
from ttydsp.biquad import Biquad, FilterType
from ttydsp.agc import Agc
from ttydsp.baudot import decode_samples

lpf = Biquad(FilterType.LPF, 0.0, 1000.0, 8000.0, 0.707)
filtered = [lpf.process(x) for x in (0.0, 0.5, 1.0, 0.5)]

agc = Agc()
levelled = [agc.process(x) for x in filtered]

# An idle (closed) loop decodes to nothing.
assert decode_samples([False] * 8000) == ""
```

## What it does not do

There is no command-line program and no audio or serial input/output. The
tone oscillator is not included: `AfskGenerator` only reports the chosen
frequency through the callback you supply. GPIO, UART, timer, output-compare,
SPI and interrupt-controller set-up are not modelled; `System` only runs
hooks you provide for those steps.