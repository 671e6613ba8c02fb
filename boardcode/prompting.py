"""Assembly of the request sent to the code generation service."""

from __future__ import annotations

import json
from typing import Any, Dict, Iterable, List

from .hardware.deriver import active_peripherals
from .hardware.parser import HardwareConfigError, parse_hardware_config
from .models import PeripheralItem

SYSTEM_INSTRUCTION = """\
You are an embedded "Board-to-Code" agent. The user selects a development board or
core chip and a programming language; you receive the parsed schematic / PCB netlist
(the connection graph) of that board. From it you generate peripheral initialisation
and driver code, then combine it with the user's functional requirements into a
complete project that compiles, runs and can be verified.

# 0) Working rules
- Runnable, maintainable and portable code comes first.
- Infer only from the supplied chip/board information, connections, peripheral list
  and requirements. List every missing piece of information as a blocking item or an
  open question, state the default assumption you made, and keep producing usable code.
- Follow the selected language and ecosystem (for example C + STM32Cube HAL, C + NXP
  MCUXpresso SDK, C/C++ + ESP-IDF, C/C++ + Arduino, Rust, MicroPython) and prefer the
  official SDK and its recommended drivers.
- Every peripheral listed in user_requirements.active_peripherals must be initialised
  and used. Peripherals that are not selected may be ignored unless something depends
  on them.

# 2) Tasks (all required)
A. Parse the connections: turn every bus / IO mapping into a peripheral configuration
   table and flag conflicts and gaps.
B. Peripheral-level code: initialisation, basic read/write API and a minimal self test
   for every attached device.
C. System-level project: main(), drivers/, board_support/, app/.
D. Integration notes and verification steps.

# 3) Output format (mandatory)
Answer in Markdown using the structure below and keep every heading.

## III. Complete project skeleton (compilable and runnable)
- Project Structure (directory tree)
- Contents of the key files...
"""


def feature_lines(features: str) -> List[str]:
    return [line for line in features.split("\n") if line.strip()]


def build_generation_payload(
    config_text: str,
    peripherals: Iterable[PeripheralItem],
    features: str,
) -> Dict[str, Any]:
    """Merge the configuration with the user's requirements.

    Raises HardwareConfigError when ``config_text`` does not parse.
    """
    config = parse_hardware_config(config_text)
    payload = dict(config.raw)
    payload["user_requirements"] = {
        "features": feature_lines(features),
        "active_peripherals": active_peripherals(peripherals),
    }
    return payload


def build_user_prompt(payload: Dict[str, Any]) -> str:
    return "Input Data:\n" + json.dumps(payload, indent=2, ensure_ascii=False)


__all__ = [
    "HardwareConfigError",
    "SYSTEM_INSTRUCTION",
    "build_generation_payload",
    "build_user_prompt",
    "feature_lines",
]
