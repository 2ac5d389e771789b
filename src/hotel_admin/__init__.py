"""Admin back office for the hotel website: media storage, REST clients and admin forms."""
