"""Point-in-time reads of host and process state.

Nothing here is cached: each call queries psutil again so the numbers always
reflect the moment of the request.
"""
import ipaddress
import os
import platform
import socket
import sys
import tempfile
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Tuple

import psutil

from ..core.config import settings
from .utilities import format_bytes

FAMILIES = {socket.AF_INET: "IPv4", socket.AF_INET6: "IPv6"}
EMPTY_MAC = "00:00:00:00:00:00"


def _percent(part: float, total: float) -> float:
    return (part / total * 100) if total else 0.0


def _sized(num: int) -> Dict[str, Any]:
    return {"bytes": num, "formatado": format_bytes(num)}


def _process_uptime() -> float:
    return max(time.time() - psutil.Process().create_time(), 0.0)


def _cpu_model() -> str:
    model = platform.processor()
    if not model and sys.platform.startswith("linux"):
        try:
            with open("/proc/cpuinfo", encoding="utf-8") as fh:
                for line in fh:
                    if line.startswith("model name"):
                        model = line.split(":", 1)[1]
                        break
        except OSError:
            model = ""
    return model.strip() or "N/A"


def system_info() -> Dict[str, Any]:
    mem = psutil.virtual_memory()
    used = mem.total - mem.available
    return {
        "plataforma": sys.platform,
        "arquitetura": platform.machine(),
        "pythonVersion": platform.python_version(),
        "uptime": {
            "processo": int(_process_uptime()),
            "sistema": int(time.time() - psutil.boot_time()),
        },
        "memoria": {
            "total": mem.total,
            "livre": mem.available,
            "usada": used,
            "percentualUsado": f"{_percent(used, mem.total):.2f}%",
        },
        "cpus": {
            "quantidade": psutil.cpu_count() or 0,
            "modelo": _cpu_model(),
        },
        "hostname": socket.gethostname(),
        "homeDir": str(Path.home()),
        "tempDir": tempfile.gettempdir(),
    }


def memory_info() -> Dict[str, Any]:
    mem = psutil.virtual_memory()
    free = mem.available
    used = mem.total - free
    return {
        "total": _sized(mem.total),
        "livre": _sized(free),
        "usada": _sized(used),
        "percentualUsado": f"{_percent(used, mem.total):.2f}%",
        "percentualLivre": f"{_percent(free, mem.total):.2f}%",
    }


def cpu_info() -> Dict[str, Any]:
    times = psutil.cpu_times(percpu=True)
    try:
        freqs = psutil.cpu_freq(percpu=True) or []
    except (AttributeError, NotImplementedError, OSError):
        # not every platform exposes frequencies
        freqs = []
    model = _cpu_model()

    details = []
    for idx, cpu in enumerate(times):
        speed = freqs[idx].current if idx < len(freqs) else (freqs[0].current if freqs else 0)
        details.append({
            "indice": idx,
            "modelo": model,
            "velocidade": f"{speed:.0f} MHz",
            "tempos": {
                "usuario": int(cpu.user * 1000),
                "sistema": int(cpu.system * 1000),
                "idle": int(cpu.idle * 1000),
                "irq": int(getattr(cpu, "irq", 0.0) * 1000),
            },
        })
    return {"quantidade": len(details), "detalhes": details}


def _is_internal(address: str) -> bool:
    try:
        return ipaddress.ip_address(address.split("%", 1)[0]).is_loopback
    except ValueError:
        return False


def network_info() -> Dict[str, Any]:
    interfaces: Dict[str, List[Dict[str, Any]]] = {}
    for name, addrs in psutil.net_if_addrs().items():
        mac = next((a.address for a in addrs if a.family == psutil.AF_LINK), EMPTY_MAC)
        entries = [
            {
                "endereco": a.address,
                "netmask": a.netmask or "",
                "familia": FAMILIES[a.family],
                "mac": mac,
                "interno": _is_internal(a.address),
            }
            for a in addrs
            if a.family in FAMILIES
        ]
        if entries:
            interfaces[name] = entries
    return {"interfaces": interfaces, "hostname": socket.gethostname()}


def process_info() -> Dict[str, Any]:
    proc = psutil.Process()
    usage = proc.memory_info()
    return {
        "pid": os.getpid(),
        "versao": platform.python_version(),
        "plataforma": sys.platform,
        "arquitetura": platform.machine(),
        "uptime": int(_process_uptime()),
        "memoria": {
            "rss": _sized(usage.rss),
            "vms": _sized(usage.vms),
        },
        "threads": proc.num_threads(),
        "variaveisAmbiente": len(os.environ),
    }


def health() -> Tuple[Dict[str, Any], bool]:
    """Return the health payload and whether the host is degraded."""
    mem = psutil.virtual_memory()
    free_pct = _percent(mem.available, mem.total)
    degraded = free_pct < settings.HEALTH_MIN_FREE_MEMORY_PCT
    status = "warning" if degraded else "ok"
    payload = {
        "status": status,
        "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        "uptime": _process_uptime(),
        "memoria": {"livre": f"{free_pct:.2f}%", "status": status},
    }
    return payload, degraded
