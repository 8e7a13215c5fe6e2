import numpy as np

from .statistics import Statistics


class SimulationStatistics(Statistics):
    """
    Simulator-only statistics with "God's view" access.

    Adds per-passenger metrics on top of the broker recordings. Real call
    panels can't observe passengers, so these numbers only exist in simulation.
    """
    def __init__(self, env, broadcast_pipe):
        super().__init__(env, broadcast_pipe)
        self.passengers = []

    def register_passenger(self, passenger):
        """Register a passenger object for metrics collection"""
        self.passengers.append(passenger)

    def get_passenger_metrics(self):
        """
        Aggregate passenger metrics.

        Returns:
            dict: {metric_name: {'count', 'mean', 'min', 'max'}} for waiting,
                  riding and total journey time, plus passenger counters
        """
        samples = {
            'waiting_time': [p.get_waiting_time() for p in self.passengers],
            'riding_time': [p.get_riding_time() for p in self.passengers],
            'total_journey_time': [p.get_total_journey_time() for p in self.passengers],
        }

        metrics = {}
        for metric_name, values in samples.items():
            data = np.array([v for v in values if v is not None], dtype=float)
            if data.size == 0:
                metrics[metric_name] = {'count': 0, 'mean': None, 'min': None, 'max': None}
            else:
                metrics[metric_name] = {
                    'count': int(data.size),
                    'mean': float(np.mean(data)),
                    'min': float(np.min(data)),
                    'max': float(np.max(data)),
                }

        metrics['passengers'] = len(self.passengers)
        metrics['arrived'] = sum(1 for p in self.passengers if p.is_arrived())
        metrics['rejected_boardings'] = sum(p.rejected_boardings for p in self.passengers)
        return metrics

    def print_passenger_metrics_summary(self):
        """Print per-passenger metrics (simulation only)"""
        metrics = self.get_passenger_metrics()

        print("\n" + "="*80)
        print("   PASSENGER METRICS SUMMARY (SIMULATION ONLY)")
        print("="*80)
        print(f"Passengers: {metrics['passengers']}, arrived: {metrics['arrived']}, "
              f"rejected boardings: {metrics['rejected_boardings']}")

        labels = {
            'waiting_time': "Waiting Time (Hall to Boarding)",
            'riding_time': "Riding Time",
            'total_journey_time': "Total Journey Time",
        }
        for metric_name, label in labels.items():
            values = metrics[metric_name]
            if not values['count']:
                continue
            print(f"\n{label}:")
            print(f"  Count:   {values['count']:>6} passengers")
            print(f"  Average: {values['mean']:>6.2f} seconds")
            print(f"  Min:     {values['min']:>6.2f} seconds")
            print(f"  Max:     {values['max']:>6.2f} seconds")

        print("="*80)
