from prometheus_client import Counter, Histogram


class TicketCareMetrics:
    """
    TicketCare API business metrics

    Tracks organizer writes (ticket type provisioning, inventory rows) and
    how long the dashboard list queries take.
    """

    def __init__(self) -> None:
        # ========== Organizer Writes ==========
        self.ticket_type_provisioning = Counter(
            'ticket_type_provisioning_total',
            'Ticket type provisioning attempts',
            ['result'],  # result: success/failure
        )

        self.inventory_rows_created = Counter(
            'inventory_rows_created_total',
            'Inventory rows created by ticket type provisioning',
        )

        # ========== Read Side ==========
        self.list_query_duration = Histogram(
            'list_query_duration_seconds',
            'Dashboard list query duration',
            ['endpoint'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

    def record_provisioning(self, *, success: bool, inventory_rows: int = 0) -> None:
        self.ticket_type_provisioning.labels(result='success' if success else 'failure').inc()
        if success and inventory_rows:
            self.inventory_rows_created.inc(inventory_rows)

    def observe_list_query(self, *, endpoint: str, duration: float) -> None:
        self.list_query_duration.labels(endpoint=endpoint).observe(duration)


# Global metrics instance
metrics = TicketCareMetrics()
