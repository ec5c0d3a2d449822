#!/usr/bin/env python3
"""Log viewer and analyzer for echo backend logs."""

import argparse
import statistics
import sys
import time
from collections import deque
from pathlib import Path
from typing import Dict, List, Optional

# ANSI color codes
class Colors:
    RED = '\033[91m'
    YELLOW = '\033[93m'
    GREEN = '\033[92m'
    RESET = '\033[0m'

# Constants
DEFAULT_LINES = 50
FOLLOW_SLEEP = 0.1

LOG_FILES = {
    "main": "echo_backend.log",
    "error": "echo_backend_errors.log",
    "access": "echo_backend_access.log"
}


def tail_file(filepath: Path, lines: int = DEFAULT_LINES) -> List[str]:
    """Get last N lines from file efficiently."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            return list(deque(f, maxlen=lines))
    except FileNotFoundError:
        return [f"Log file not found: {filepath}\n"]
    except (OSError, UnicodeDecodeError) as e:
        return [f"Error reading log file {filepath}: {e}\n"]


def colorize_line(line: str) -> str:
    """Apply color formatting to log line based on level."""
    line = line.rstrip()
    if "ERROR" in line:
        return f"{Colors.RED}{line}{Colors.RESET}"
    elif "WARNING" in line:
        return f"{Colors.YELLOW}{line}{Colors.RESET}"
    elif "INFO" in line:
        return f"{Colors.GREEN}{line}{Colors.RESET}"
    return line

def follow_log(filepath: Path) -> None:
    """Follow a log file in real-time (like tail -f)."""
    try:
        with filepath.open('r', encoding='utf-8') as f:
            f.seek(0, 2)  # Go to end of file

            while True:
                line = f.readline()
                if not line:
                    time.sleep(FOLLOW_SLEEP)
                    continue
                print(colorize_line(line))

    except KeyboardInterrupt:
        print("\nLog following stopped.")
    except FileNotFoundError:
        print(f"Log file not found: {filepath}")
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error following log file: {e}")


def parse_access_line(line: str) -> Optional[Dict[str, str]]:
    """Split an access line into its key=value fields."""
    if "method=" not in line:
        return None
    fields = {}
    for part in line.rstrip().split(" | "):
        key, sep, value = part.partition("=")
        if sep:
            fields[key.strip()] = value
    return fields


def classify_request(method: str, path: str) -> str:
    if method == "GET" and path == "/":
        return "root"
    if method == "GET" and path == "/health":
        return "health_checks"
    if method == "GET":
        return "get_echoes"
    if method == "POST":
        return "post_echoes"
    return "other"


def collect_stats(log_dir: Path) -> dict:
    """Gather request, error and timing statistics from the log files."""
    stats = {
        'total_requests': 0,
        'root': 0,
        'health_checks': 0,
        'get_echoes': 0,
        'post_echoes': 0,
        'other': 0,
        'server_errors': 0,
        'errors': 0,
        'warnings': 0,
        'pods': set(),
        'response_times': []
    }

    main_log = log_dir / LOG_FILES["main"]
    if main_log.exists():
        with main_log.open('r', encoding='utf-8') as f:
            for line in f:
                if "| ERROR |" in line:
                    stats['errors'] += 1
                elif "| WARNING |" in line:
                    stats['warnings'] += 1

    access_log = log_dir / LOG_FILES["access"]
    if access_log.exists():
        with access_log.open('r', encoding='utf-8') as f:
            for line in f:
                fields = parse_access_line(line)
                if fields is None:
                    continue

                stats['total_requests'] += 1
                stats[classify_request(fields.get('method', ''), fields.get('path', ''))] += 1

                pod = fields.get('pod')
                if pod and pod != "unknown":
                    stats['pods'].add(pod)

                if fields.get('status', '').startswith('5'):
                    stats['server_errors'] += 1

                if 'response_time' in fields:
                    try:
                        stats['response_times'].append(float(fields['response_time'].rstrip('s')))
                    except ValueError:
                        pass

    return stats


def analyze_logs(log_dir: Path) -> None:
    """Analyze logs and provide comprehensive statistics."""
    stats = collect_stats(log_dir)

    print("=" * 60)
    print("ECHO BACKEND LOG ANALYSIS")
    print("=" * 60)

    # Request breakdown
    print(f"Total Requests:     {stats['total_requests']}")
    print(f"  - Root:           {stats['root']}")
    print(f"  - Health Checks:  {stats['health_checks']}")
    print(f"  - GET Echoes:     {stats['get_echoes']}")
    print(f"  - POST Echoes:    {stats['post_echoes']}")
    print(f"  - Other:          {stats['other']}")
    print(f"  - 5xx Responses:  {stats['server_errors']}")
    print()

    # Error statistics
    print(f"Errors:             {stats['errors']}")
    print(f"Warnings:           {stats['warnings']}")
    print()

    # Pod statistics
    print(f"Distinct Pods:      {len(stats['pods'])}")
    if stats['pods']:
        pod_list = ', '.join(sorted(stats['pods'])[:10])  # Limit display
        if len(stats['pods']) > 10:
            pod_list += f" (and {len(stats['pods']) - 10} more)"
        print(f"Pod Names:          {pod_list}")
    print()

    # Response time statistics
    if stats['response_times']:
        avg_time = statistics.mean(stats['response_times'])
        median_time = statistics.median(stats['response_times'])
        print(f"Average Response:   {avg_time:.3f} seconds")
        print(f"Median Response:    {median_time:.3f} seconds")
        print(f"Fastest Response:   {min(stats['response_times']):.3f} seconds")
        print(f"Slowest Response:   {max(stats['response_times']):.3f} seconds")

    print("=" * 60)


def main() -> None:
    """Main entry point for log viewer."""
    parser = argparse.ArgumentParser(description="Echo Backend Log Viewer and Analyzer")
    parser.add_argument("--log-dir", type=Path, default=Path("logs"),
                       help="Directory containing log files")
    parser.add_argument("--lines", "-n", type=int, default=DEFAULT_LINES,
                       help="Number of lines to show")
    parser.add_argument("--follow", "-f", action="store_true",
                       help="Follow log in real-time")
    parser.add_argument("--analyze", "-a", action="store_true",
                       help="Analyze logs and show statistics")
    parser.add_argument("--file", choices=sorted(LOG_FILES), default="main",
                       help="Which log file to view")

    args = parser.parse_args()

    if not args.log_dir.exists():
        print(f"Log directory not found: {args.log_dir}")
        print("Make sure the server has been started at least once.")
        sys.exit(1)

    if args.analyze:
        analyze_logs(args.log_dir)
        return

    log_file = args.log_dir / LOG_FILES[args.file]

    if args.follow:
        print(f"Following {log_file} (Press Ctrl+C to stop)")
        print("-" * 60)
        follow_log(log_file)
    else:
        print(f"Last {args.lines} lines from {log_file}:")
        print("-" * 60)
        lines = tail_file(log_file, args.lines)
        for line in lines:
            print(colorize_line(line))


if __name__ == "__main__":
    main()
