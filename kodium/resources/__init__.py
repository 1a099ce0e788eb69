"""Static files published alongside the Kodium theme."""
