"""Query Arc's windows, spaces and tabs through osascript (JXA)."""

import subprocess
from typing import List, Optional

from .config import log
from .errors import BridgeExecutionFailure

OSASCRIPT = "osascript"
UNKNOWN_BRIDGE_ERROR = "Unknown error running osascript."

JXA_SOURCE = r"""function run() {
  const arc = Application("Arc");
  if (!arc.running()) {
    throw new Error("Arc is not running");
  }

  const result = [];
  const windows = arc.windows;
  const windowCount = windows.length;

  for (let wi = 0; wi < windowCount; wi++) {
    const win = windows[wi];
    const windowName = win.name();
    const spaces = win.spaces;
    const spaceCount = spaces.length;

    for (let si = 0; si < spaceCount; si++) {
      const space = spaces[si];
      const spaceTitle = space.title();
      const tabs = space.tabs;
      const tabCount = tabs.length;

      for (let ti = 0; ti < tabCount; ti++) {
        const tab = tabs[ti];
        const url = tab.url();
        if (!url) {
          continue;
        }

        result.push({
          windowIndex: wi + 1,
          windowName: windowName || "",
          spaceIndex: si + 1,
          spaceTitle: spaceTitle || "",
          tabIndex: ti + 1,
          tabTitle: tab.title() || "",
          location: tab.location() || "",
          url: url,
        });
      }
    }
  }

  return JSON.stringify(result);
}"""


def build_command(osascript: Optional[str] = None) -> List[str]:
    return [osascript or OSASCRIPT, "-l", "JavaScript", "-e", JXA_SOURCE]


def run_query(osascript: Optional[str] = None) -> str:
    """Run the JXA inventory script and return its raw stdout.

    Blocks until osascript exits; there is no timeout.
    Raises BridgeExecutionFailure when osascript cannot be started or
    exits non-zero.
    """
    cmd = build_command(osascript)
    log(f"run {cmd[0]} -l JavaScript -e <jxa>")
    try:
        proc = subprocess.run(
            cmd,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            stdin=subprocess.DEVNULL,
        )
    except OSError as exc:
        raise BridgeExecutionFailure(str(exc) or UNKNOWN_BRIDGE_ERROR) from exc

    log(f"osascript exited with status {proc.returncode}")
    if proc.returncode != 0:
        message = (proc.stderr or "").strip() or UNKNOWN_BRIDGE_ERROR
        raise BridgeExecutionFailure(message, status=proc.returncode)
    return proc.stdout or ""
