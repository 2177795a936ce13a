import json


class Format:
    def __init__(self, domains=None):
        self.domains = list(domains) if domains is not None else []

    def list(self):
        return '\n'.join(str(domain.get('domain', '')) if isinstance(domain, dict) else str(domain)
                         for domain in self.domains)

    def json(self, indent=2, sort_keys=True):
        return json.dumps(self.domains, indent=indent, sort_keys=sort_keys)

    def csv(self):
        """
        Converts the candidate data to a CSV string.
        """
        cols = ['domain', 'index']

        # Dynamically add other keys (columns) found in the candidate data
        for domain in self.domains:
            for k in domain.keys() - cols:
                cols.append(k)

        # Sort the columns alphabetically after the 'index' column
        cols = cols[:2] + sorted(cols[2:])

        # Initialize CSV with header row
        csv = [','.join(cols)]

        # Create a row for each candidate
        for domain in self.domains:
            row = []
            for val in [domain.get(c, '') for c in cols]:
                if isinstance(val, str):
                    if ',' in val or '"' in val:
                        row.append('"{}"'.format(val.replace('"', '""')))  # Quote strings holding separators
                    else:
                        row.append(val)
                elif isinstance(val, list):
                    row.append(';'.join(val))  # Join list items with semicolon
                elif isinstance(val, int):
                    row.append(str(val))  # Convert integers to string
                else:
                    row.append('')  # None
            csv.append(','.join(row))

        return '\n'.join(csv)

    def render(self, output_format='list'):
        if output_format == 'list':
            return self.list()
        if output_format == 'json':
            return self.json()
        if output_format == 'csv':
            return self.csv()
        raise ValueError(f"Unknown output format: {output_format}")
