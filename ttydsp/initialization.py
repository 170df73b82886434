"""System start-up: clocks, flash settings and peripherals in a fixed order."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from .adchs import Adchs
from .clock import ClockController
from .interrupts import InterruptTable

# Order in which the peripherals are brought up.
INIT_ORDER = ("clk", "gpio", "adchs", "uart2", "tmr2", "ocmp1", "spi1", "evic")

PREFETCH_ENABLE = 3
FLASH_WAIT_STATES = 3
ECC_CONFIG = 3


class System:
    """The board: clock and ADC models plus hooks for the other peripherals.

    ``hooks`` maps step names from :data:`INIT_ORDER` to callables taking no
    arguments. For ``clk`` and ``adchs`` the hook runs after the built-in
    model has been initialised; steps without a hook only set up the models.
    """

    def __init__(self, hooks: Optional[Mapping[str, Callable[[], object]]] = None):
        hooks = dict(hooks or {})
        unknown = set(hooks) - set(INIT_ORDER)
        if unknown:
            raise ValueError(f"unknown initialisation steps: {sorted(unknown)}")
        for name, hook in hooks.items():
            if not callable(hook):
                raise TypeError(f"hook for {name!r} is not callable")
        self.hooks = hooks
        self.clock = ClockController()
        self.adc = Adchs()
        self.interrupts = InterruptTable()
        self.interrupts_enabled = False
        self.prefetch_enable = 0
        self.flash_wait_states = 0
        self.ecc_config = 0
        self.steps = []

    def _run(self, name):
        if name == "clk":
            self.clock.initialize()
            self.prefetch_enable = PREFETCH_ENABLE
            self.flash_wait_states = FLASH_WAIT_STATES
            self.ecc_config = ECC_CONFIG
        elif name == "adchs":
            self.adc.initialize()
        hook = self.hooks.get(name)
        if hook is not None:
            hook()
        self.steps.append(name)

    def initialize(self):
        """Bring the system up with interrupts masked, then enable them.

        Returns the names of the steps performed, in order. If a step fails
        its exception propagates and interrupts stay disabled.
        """
        self.interrupts_enabled = False
        self.steps = []
        for name in INIT_ORDER:
            self._run(name)
        self.interrupts_enabled = True
        return tuple(self.steps)