"""Data types, attributes, user and media types, views, projection, copies, responses and resources."""