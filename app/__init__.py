"""MedLog backend: domain notifications for the clinical record platform."""
