"""HealthCare Pro notification and reminder service."""
