"""Issue reporters, grouped by the part of the page they inspect."""