from prometheus_client import Counter, Histogram


class ReservationMetrics:
    """
    Seat Reservation Core Metrics Collector

    Tracks booking outcomes and fleet-wide availability queries per track kind
    """

    def __init__(self):
        self.seat_booking_requests = Counter(
            'seat_booking_requests_total',
            'Total seat booking requests',
            ['track_kind', 'result'],  # result: booked/conflict/invalid
        )

        self.availability_queries = Counter(
            'seat_availability_queries_total',
            'Total fleet-wide availability queries',
            ['track_kind', 'result'],  # result: ok/invalid
        )

        self.operation_duration = Histogram(
            'seat_pool_operation_duration_seconds',
            'Seat pool operation duration',
            ['operation', 'track_kind'],  # operation: book/check_availability
            buckets=[0.00001, 0.0001, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5],
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, track_kind: str, result: str, duration: float):
        self.seat_booking_requests.labels(track_kind=track_kind, result=result).inc()
        self.operation_duration.labels(operation='book', track_kind=track_kind).observe(duration)

    def record_availability_query(self, *, track_kind: str, result: str, duration: float):
        self.availability_queries.labels(track_kind=track_kind, result=result).inc()
        self.operation_duration.labels(
            operation='check_availability', track_kind=track_kind
        ).observe(duration)


# Global metrics instance
metrics = ReservationMetrics()
