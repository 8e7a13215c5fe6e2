import json
import re
from datetime import datetime

import matplotlib.pyplot as plt
import numpy as np


class Statistics:
    """
    Receives every broker message and records what is needed for analysis,
    as an independent "recorder".

    Records:
    - Elevator floor trajectories (from status reports)
    - Door open/close events
    - Hall calls and their assignment wait times
    - A JSON Lines event log for offline playback
    """
    def __init__(self, env, broadcast_pipe):
        self.env = env
        self.broadcast_pipe = broadcast_pipe
        self.elevator_trajectories = {}  # {elevator_name: [(timestamp, floor), ...]}
        self.door_events_history = {}  # {elevator_name: [(timestamp, floor, 'OPEN'|'CLOSE'), ...]}
        self.hall_calls_history = []  # [(timestamp, floor, direction), ...]
        self.hall_call_assignments = []  # [(timestamp, floor, direction, elevator, wait_time), ...]
        self.current_elevator_states = {}  # Latest status report per elevator

        # JSON Lines event log for offline playback
        self.event_log = []
        self.simulation_metadata = {}

    def _add_event_log(self, event_type, event_data):
        self.event_log.append({
            "time": self.env.now,
            "type": event_type,
            "data": event_data
        })

    def set_simulation_metadata(self, metadata):
        """
        Set simulation metadata (called before simulation starts).

        Args:
            metadata (dict): Simulation configuration (num_floors, elevators, etc.)
        """
        self.simulation_metadata = {
            "format_version": "1.0",
            "timestamp": datetime.now().isoformat(),
            "config": metadata
        }

    def start_listening(self):
        """
        Main process intercepting global broadcasts.
        """
        while True:
            data = yield self.broadcast_pipe.get()
            self.record(data.get('topic', ''), data.get('message', {}))

    def record(self, topic, message):
        """Record a single broker message"""
        status_match = re.search(r'elevator/(.*?)/status', topic)
        if status_match:
            elevator_name = status_match.group(1)
            trajectory = self.elevator_trajectories.setdefault(elevator_name, [])
            point = (message.get('timestamp'), message.get('current_floor'))
            # Skip exact duplicates of the last data point
            if not trajectory or trajectory[-1] != point:
                trajectory.append(point)
            self.current_elevator_states[elevator_name] = message
            self._add_event_log('elevator_status', {
                'elevator': elevator_name,
                'floor': message.get('current_floor'),
                'direction': message.get('direction'),
                'doors_open': message.get('doors_open'),
                'on_maintenance': message.get('on_maintenance'),
                'pending_stops': message.get('pending_stops', []),
            })
            return

        door_match = re.search(r'elevator/(.*?)/door', topic)
        if door_match:
            elevator_name = door_match.group(1)
            self.door_events_history.setdefault(elevator_name, []).append(
                (message.get('timestamp'), message.get('floor'), message.get('event_type')))
            self._add_event_log('door_event', {
                'elevator': elevator_name,
                'floor': message.get('floor'),
                'event_type': message.get('event_type'),
            })
            return

        if topic == 'controller/hall_call':
            self.hall_calls_history.append(
                (message.get('timestamp'), message.get('floor'), message.get('direction')))
            self._add_event_log('hall_call', {
                'floor': message.get('floor'),
                'direction': message.get('direction'),
            })
        elif topic == 'controller/hall_call_assignment':
            self.hall_call_assignments.append((
                message.get('timestamp'),
                message.get('floor'),
                message.get('direction'),
                message.get('elevator'),
                message.get('wait_time'),
            ))
            self._add_event_log('hall_call_assignment', {
                'floor': message.get('floor'),
                'direction': message.get('direction'),
                'elevator': message.get('elevator'),
                'wait_time': message.get('wait_time'),
            })

    def get_hall_call_wait_summary(self):
        """
        Summary of the time between a hall call and its assignment.

        Returns:
            dict: count, mean, median, p95 and max (seconds), None values if no data
        """
        waits = np.array([a[4] for a in self.hall_call_assignments if a[4] is not None], dtype=float)
        if waits.size == 0:
            return {'count': 0, 'mean': None, 'median': None, 'p95': None, 'max': None}
        return {
            'count': int(waits.size),
            'mean': float(np.mean(waits)),
            'median': float(np.median(waits)),
            'p95': float(np.percentile(waits, 95)),
            'max': float(np.max(waits)),
        }

    def print_summary(self):
        """Print hall call statistics"""
        print("\n" + "="*80)
        print("   HALL CALL SUMMARY")
        print("="*80)
        print(f"Hall calls:    {len(self.hall_calls_history):>6}")
        print(f"Assignments:   {len(self.hall_call_assignments):>6}")
        summary = self.get_hall_call_wait_summary()
        if summary['count']:
            print(f"\nAssignment Wait Time (Call to Assignment):")
            print(f"  Average: {summary['mean']:>6.2f} seconds")
            print(f"  Median:  {summary['median']:>6.2f} seconds")
            print(f"  95th:    {summary['p95']:>6.2f} seconds")
            print(f"  Max:     {summary['max']:>6.2f} seconds")
        for elevator_name in sorted(self.door_events_history):
            openings = sum(1 for e in self.door_events_history[elevator_name] if e[2] == 'OPEN')
            print(f"{elevator_name}: {openings} door openings")
        print("="*80)

    def plot_trajectory_diagram(self, output_filename='elevator_trajectory_diagram.png', show=True):
        """
        Draw the trajectory diagram (floor over time) after the simulation ends

        Args:
            output_filename: PNG file to save the diagram to
            show: Open the matplotlib window after saving
        """
        print("\n--- Plotting: Elevator Trajectory Diagram ---")
        plt.figure(figsize=(14, 8))

        elevator_colors = ['#1f77b4', '#ff7f0e', '#2ca02c', '#d62728', '#9467bd', '#8c564b']

        for idx, name in enumerate(sorted(self.elevator_trajectories)):
            trajectory = self.elevator_trajectories[name]
            if not trajectory:
                continue

            times, floors = zip(*sorted(trajectory, key=lambda x: x[0]))
            color = elevator_colors[idx % len(elevator_colors)]
            plt.step(times, floors, where='post', label=name, linewidth=2.5, color=color, alpha=0.8)

            # Door openings as markers on the trajectory
            openings = [(t, f) for t, f, kind in self.door_events_history.get(name, []) if kind == 'OPEN']
            if openings:
                open_times, open_floors = zip(*openings)
                plt.scatter(open_times, open_floors, marker='s', s=40, color=color, zorder=5)

        # Hall calls as arrows
        for timestamp, floor, direction in self.hall_calls_history:
            plt.annotate('↑' if direction == 'UP' else '↓', (timestamp, floor),
                         ha='center', va='center', fontsize=12, color='gray')

        plt.title("Elevator Trajectory Diagram")
        plt.xlabel("Time (s)")
        plt.ylabel("Floor")
        plt.grid(True, which='both', linestyle='--', alpha=0.7)

        all_floors = [floor for trajectory in self.elevator_trajectories.values() for _, floor in trajectory]
        if all_floors:
            plt.yticks(range(int(min(all_floors)), int(max(all_floors)) + 1))

        if self.elevator_trajectories:
            plt.legend(loc='upper right', fontsize=10)

        plt.savefig(output_filename, dpi=150, bbox_inches='tight')
        print(f"Trajectory diagram saved to: {output_filename}")

        if show:
            plt.show()
        plt.close()
        return output_filename

    def save_event_log(self, filename='simulation_log.jsonl'):
        """
        Save the event log to a JSON Lines file.

        Args:
            filename (str): Name of the output file
        """
        print(f"\nSaving event log to {filename}...")

        with open(filename, 'w', encoding='utf-8') as f:
            if self.simulation_metadata:
                f.write(json.dumps({
                    "type": "metadata",
                    "data": self.simulation_metadata
                }) + '\n')

            for event in self.event_log:
                f.write(json.dumps(event, ensure_ascii=False) + '\n')

        print(f"Event log saved: {len(self.event_log)} events written to {filename}")
        return filename
