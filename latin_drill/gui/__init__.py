"""Qt integration for Latin Drill: signal-based presenters and a QTimer ticker."""
