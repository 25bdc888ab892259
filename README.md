# soundblocks

Small, dependency-free audio processing blocks that work one sample at a time.
Each block is a plain Python object. Most are created with the sample rate of
your audio stream. You then call `process` once for each sample.

## What is included

- **Filters**
  - `soundblocks.svf.Svf`: a double-sampled state-variable filter. After each
    call to `process(value)`, read the `low`, `high`, `band`, `notch` and `peak`
    attributes. Set `frequency`, `resonance` and `drive` as properties.
  - `soundblocks.soap.Soap`: a second-order all-pass filter. After each call to
    `process`, read `bandpass` and `bandreject`. Set `center_freq` and
    `bandwidth` in Hz.
  - `soundblocks.onepole.OnePole`: a one-pole filter. Its `frequency` is a
    fraction of the sample rate. Its `mode` is `OnePoleMode.LOW_PASS` or
    `OnePoleMode.HIGH_PASS`.
  - `soundblocks.ladder.LadderFilter`: a 4-pole ladder filter with 4x
    oversampling. Choose the response with `mode`, one of the `LadderMode`
    values `LP24`, `LP12`, `BP24`, `BP12`, `HP24` and `HP12`. The properties
    are `frequency`, `resonance`, `passband_gain` and `input_drive`.
  - `soundblocks.fir.FirFilter`: a direct-form FIR filter. Coefficients are
    given tail-first, or head-first with `reverse=True`. The optional
    `max_size` truncates the impulse response. The optional `max_block` limits
    `process_block` and raises `ValueError` when exceeded.
- **Dynamics**
  - `soundblocks.crossfade.CrossFade`: mixes two inputs according to `pos`,
    from 0 to 1, along a `CrossFadeCurve`: `LIN`, `CPOW`, `LOG` or `EXP`.
  - `soundblocks.limiter.Limiter`: a peak limiter. Its
    `process_block(samples, pre_gain)` returns a new list. The module also has
    the `soft_limit` helper.
- **Effects**
  - `soundblocks.overdrive.Overdrive` with `soft_clip`.
  - `soundblocks.wavefolder.Wavefolder`.
  - `soundblocks.autowah.Autowah`.
  - `soundblocks.decimator.Decimator`: sample-and-hold downsampling followed by
    bit crushing.
- **Control**
  - `soundblocks.adenv.AdEnv`: an attack/decay envelope. Start it with
    `trigger()`. Its stages are listed in `AdEnvSegment`.
  - `soundblocks.adsr.Adsr`: a gate-driven ADSR envelope. Its stages are
    listed in `AdsrSegment`.
  - `soundblocks.phasor.Phasor`: a 0 to 1 ramp.
- **Noise**
  - `soundblocks.particle.Particle`: random impulses through a resonant
    band-pass filter.
  - `soundblocks.fractal.FractalNoise`: sums octaves of any generator that has
    a settable `frequency` attribute and a `process()` method, for example
    `FractalNoise(Particle, 3, 48000.0)`.
- **Drums**
  - `soundblocks.analogbassdrum.AnalogBassDrum`.
  - `soundblocks.analogsnaredrum.AnalogSnareDrum`.
  - `soundblocks.synthbassdrum.SyntheticBassDrum`, with its parts
    `SyntheticBassDrumClick` and `SyntheticBassDrumAttackNoise`.
  - `soundblocks.synthsnaredrum.SyntheticSnareDrum`.
  - `soundblocks.hihat.HiHat`. By default it uses `SquareNoise` as its metallic
    noise source and `linear_vca` as its VCA. `swing_vca` is an alternative VCA.

  Strike a drum with `trig()` or with `process(trigger=True)`.

Blocks that use randomness take an optional `rng` argument. It can be any
object with a `random()` method, such as a seeded `random.Random`, and gives
repeatable output.

## Example

```python
from soundblocks.svf import Svf
from soundblocks.adsr import Adsr
from soundblocks.analogbassdrum import AnalogBassDrum

sample_rate = 48000.0

drum = AnalogBassDrum(sample_rate)
drum.trig()
hit = [drum.process() for _ in range(4800)]

env = Adsr(sample_rate)
lowpass = Svf(sample_rate)
lowpass.frequency = 2000.0
shaped = []
for n, sample in enumerate(hit):
    gate = n < 2400
    lowpass.process(sample * env.process(gate))
    shaped.append(lowpass.low)
```

## What it does not do

This is a library of processing blocks only. It has no command-line tool, and
it does not read or write audio files or talk to sound devices. You feed it
numbers and collect the numbers it returns. It has no plain white-noise or
random-dust generator. For raw noise, use a `random.Random` instance directly.

## Tests

```
pip install -e .[test]
pytest
```