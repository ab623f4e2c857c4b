"""Backend checkout Stripe + notifications email (Where Rooms Begin)."""
