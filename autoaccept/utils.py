"""
Window helpers for locating and focusing the editor.
"""

from typing import Iterable, List, Optional, Set

import psutil


def _canonical_process_name(name: str) -> str:
    name = name.lower()
    return name[:-4] if name.endswith(".exe") else name


def _process_name(pid: int) -> Optional[str]:
    try:
        return psutil.Process(pid).name()
    except (psutil.NoSuchProcess, psutil.AccessDenied):
        return None


def matching_pids(process_names: Iterable[str]) -> Set[int]:
    """PIDs of running processes whose name is one of process_names."""
    wanted = {_canonical_process_name(n) for n in process_names}
    pids = set()
    for proc in psutil.process_iter(["pid", "name"]):
        name = proc.info.get("name")
        if name and _canonical_process_name(name) in wanted:
            pids.add(proc.info["pid"])
    return pids


def is_target_window(hwnd: int, process_names: Iterable[str]) -> bool:
    """True when the window belongs to one of the target processes."""
    import win32process

    _, pid = win32process.GetWindowThreadProcessId(hwnd)
    name = _process_name(pid)
    if name is None:
        return False
    wanted = {_canonical_process_name(n) for n in process_names}
    return _canonical_process_name(name) in wanted


def find_target_window(process_names: Iterable[str]) -> Optional[int]:
    """
    Find the editor window.

    Prefers the foreground window when it belongs to a target process,
    otherwise returns the first visible, titled top-level window of a
    matching process.

    Returns:
        Window handle, or None when no matching window exists
    """
    try:
        import win32gui
        import win32process
    except ImportError:
        return None

    process_names = tuple(process_names)
    foreground = win32gui.GetForegroundWindow()
    if foreground and is_target_window(foreground, process_names):
        return foreground

    pids = matching_pids(process_names)
    if not pids:
        return None

    candidates: List[int] = []

    def callback(hwnd, found):
        if not win32gui.IsWindowVisible(hwnd) or not win32gui.GetWindowText(hwnd):
            return True
        _, pid = win32process.GetWindowThreadProcessId(hwnd)
        if pid in pids:
            found.append(hwnd)
        return True

    win32gui.EnumWindows(callback, candidates)
    return candidates[0] if candidates else None


def focus_window(hwnd: int) -> bool:
    """Bring a window to the foreground, restoring it if minimized."""
    try:
        import win32con
        import win32gui
    except ImportError:
        return False

    try:
        if win32gui.IsIconic(hwnd):
            win32gui.ShowWindow(hwnd, win32con.SW_RESTORE)
        win32gui.SetForegroundWindow(hwnd)
        return True
    except win32gui.error:
        # Windows refuses focus changes from background processes at times
        return False


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"
