"""Definitions shared by designs: traits and attribute validation rules."""